"""Shared fixtures for the generator tests."""
from datetime import datetime

import pytest

from modeler.types.table_types import ColumnDescriptor, TableDescriptor


@pytest.fixture
def user_table():
    """id int primary key, created_at datetime nullable."""
    return TableDescriptor(
        table_name="User",
        fields=(
            ColumnDescriptor(name="id", source_type="int", is_primary=True, is_nullable=False),
            ColumnDescriptor(name="created_at", source_type="datetime", is_nullable=True),
        ),
    )


@pytest.fixture
def order_payload():
    """Table input as the caller's parsed JSON object."""
    return {
        "tableName": "Order",
        "comment": "Customer orders",
        "fields": [
            {"name": "order_id", "type": "bigint", "isPrimary": True, "isNullable": False,
             "comment": "Order id"},
            {"name": "customer_name", "type": "VARCHAR", "isPrimary": False, "isNullable": False,
             "comment": "Customer name"},
            {"name": "total_amount", "type": "decimal", "isPrimary": False, "isNullable": True,
             "defaultValue": 0},
            {"name": "is_paid", "type": "bool", "isPrimary": False, "isNullable": False},
            {"name": "extra", "type": "json", "isPrimary": False, "isNullable": True},
        ],
    }


@pytest.fixture
def fixed_time():
    return datetime(2024, 5, 1, 9, 30, 0)

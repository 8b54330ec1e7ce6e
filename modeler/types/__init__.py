from modeler.types.table_types import ColumnDescriptor, TableDescriptor, TableDescriptorError

__all__ = ["ColumnDescriptor", "TableDescriptor", "TableDescriptorError"]

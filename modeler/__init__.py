"""
DB 테이블 구조로부터 TypeScript interface / DTO / 조회 파라미터 코드를 생성하는 모듈
"""

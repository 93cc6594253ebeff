# Largest value a SQL INTEGER column (SQLite, BIGINT elsewhere) can hold
SQL_INTEGER_MAX = 2**63 - 1

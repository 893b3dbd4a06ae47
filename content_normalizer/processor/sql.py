def looks_like_integer(value: object) -> bool:
    """True for ints and for strings of ASCII digits with an optional leading minus."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, str):
        digits = value[1:] if value.startswith("-") else value
        return digits.isascii() and digits.isdigit()
    return False


def diagnostic_sql(table_name: str, primary_key_field: str, primary_key: int | str) -> str:
    """Build the SELECT a reviewer can paste to look at one record. Never executed."""
    literal = str(primary_key) if looks_like_integer(primary_key) else f"'{primary_key}'"
    return f"SELECT * FROM {table_name} WHERE {primary_key_field} = {literal};"

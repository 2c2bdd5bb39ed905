def reject_blank(v: object) -> object:
    """空白のみの文字列を拒否する

    Pydantic の field_validator から呼び出すことを想定。
    文字列以外はそのまま返し、型の検証はフィールド定義に任せる。
    """
    if isinstance(v, str) and not v.strip():
        raise ValueError("must not be blank")
    return v

from recordkeeper.shared.domain import DomainException


class RecordParseException(DomainException):
    """入力ファイルの行を解析できなかった場合

    line_number は 1 始まりの行番号、field は問題のあったフィールド名。
    """

    def __init__(self, message: str, line_number: int, field: str) -> None:
        super().__init__(f"Line {line_number}: {message}")
        self.line_number = line_number
        self.field = field


class MissingFieldException(RecordParseException):
    """必須フィールドが欠けている、または空の場合"""

    pass


class InvalidScoreFormatException(RecordParseException):
    """ID や点数が整数として解釈できない場合"""

    pass

class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（同じキーでの登録時）"""

    pass


class InvalidValueException(DomainException, ValueError):
    """フィールドの制約に違反する値が渡された場合"""

    pass


class ArithmeticOverflowException(DomainException, ArithmeticError):
    """数値フィールドの演算結果が表現可能な範囲を超えた場合"""

    pass


class PersistenceException(Exception):
    """永続化層で発生する基底例外"""

    pass


class StorageIOException(PersistenceException):
    """ファイルの読み書きに失敗した場合（権限・ディスク障害など）"""

    pass


class RecordFormatException(PersistenceException):
    """保存データが期待する形式のレコード列ではない場合"""

    pass

class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class RentalApiUnauthorizedException(DomainException):
    """レンタル API がトークンを拒否した場合（期限切れ・無効）"""

    pass

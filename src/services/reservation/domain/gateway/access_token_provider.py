from abc import ABC, abstractmethod

from services.reservation.domain.value_object.access_token import AccessToken


class AccessTokenProvider(ABC):
    """レンタル API トークン取得のインターフェース"""

    @abstractmethod
    def find_token(self) -> AccessToken | None:
        """ログイン済みであればトークンを返す

        未ログインの場合は例外を送出せず None を返す。
        """
        raise NotImplementedError

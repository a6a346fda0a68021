from datetime import date

import pytest


@pytest.fixture
def today():
    """全テスト共通の「今日」フィクスチャ"""
    return date(2024, 6, 1)

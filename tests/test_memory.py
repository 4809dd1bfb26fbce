"""InMemoryFlagsClient のユニットテスト"""

from k1s0_flags_client import FlagValue, InMemoryFlagsClient


async def test_flags_published_on_init() -> None:
    """set_flags の内容は init() 後に見えること。"""
    client = InMemoryFlagsClient()
    client.set_flags([FlagValue(name="A", enabled=True)])
    assert client.get_flags() == []
    await client.init()
    assert client.get_flag("A") == FlagValue(name="A", enabled=True)
    assert client.get_flag("B") is None


async def test_init_replaces_previous_flags() -> None:
    client = InMemoryFlagsClient()
    client.set_flags([FlagValue(name="A", enabled=True)])
    await client.init()
    client.set_flags([FlagValue(name="B", enabled=False)])
    await client.init()
    assert [flag.name for flag in client.get_flags()] == ["B"]


def test_get_user_id() -> None:
    assert InMemoryFlagsClient(user_id="u1").get_user_id() == "u1"
    assert InMemoryFlagsClient().get_user_id() is None

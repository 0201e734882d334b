import pytest

from app.schemas.wishlist import (
    AddItemRequest,
    CreateListRequest,
    LegacyWishListPayload,
    UpdateListRequest,
    WishItem,
)
from app.services.wishlist import WishListService
from app.utils.errors import NotFoundError


@pytest.fixture
def service(repository):
    return WishListService(repository)


@pytest.mark.asyncio
async def test_create_never_exposes_password(service, repository):
    created = await service.create(CreateListRequest(owner="지민", birthday="1999-03-14", password="secret"))

    assert not hasattr(created, "password")
    assert "password" not in created.model_dump(by_alias=True)
    assert created.items == []

    stored = await repository.get(created.id)
    assert stored.password == "secret"

    fetched = await service.get(created.id)
    assert "password" not in fetched.model_dump(by_alias=True)


@pytest.mark.asyncio
async def test_update_preserves_id_and_unspecified_fields(service):
    created = await service.create(CreateListRequest(owner="지민", birthday="1999-03-14", password="secret"))
    item = WishItem(title="머그컵", price="12900", url="https://ohou.se/productions/1/selling")

    updated = await service.update(created.id, UpdateListRequest(items=[item]))

    assert updated.id == created.id
    assert updated.owner == "지민"
    assert updated.birthday == "1999-03-14"
    assert updated.created_at == created.created_at
    assert [i.title for i in updated.items] == ["머그컵"]
    assert await service.verify_password(created.id, "secret") is True


@pytest.mark.asyncio
async def test_missing_list_raises_not_found(service):
    with pytest.raises(NotFoundError):
        await service.get("missing")
    with pytest.raises(NotFoundError):
        await service.update("missing", UpdateListRequest(owner="x"))
    with pytest.raises(NotFoundError):
        await service.add_item("missing", AddItemRequest(url="https://ohou.se/x"))


@pytest.mark.asyncio
async def test_delete_missing_does_not_raise(service):
    await service.delete("missing")


@pytest.mark.asyncio
async def test_add_item_assigns_id(service):
    created = await service.create(CreateListRequest(owner="지민", birthday="1999-03-14"))

    updated = await service.add_item(
        created.id,
        AddItemRequest(title="무드등", price="24900", url="https://ohou.se/productions/1/selling", comment="화이트", priority=1),
    )

    assert len(updated.items) == 1
    assert updated.items[0].id
    assert updated.items[0].comment == "화이트"
    assert updated.items[0].priority == 1


@pytest.mark.asyncio
async def test_verify_password(service):
    locked = await service.create(CreateListRequest(owner="a", birthday="2000-01-01", password="pw"))
    open_list = await service.create(CreateListRequest(owner="b", birthday="2000-01-01"))

    assert await service.verify_password(locked.id, "pw") is True
    assert await service.verify_password(locked.id, "nope") is False
    assert await service.verify_password(open_list.id, "anything") is True


@pytest.mark.asyncio
async def test_save_legacy_creates_then_overwrites_keeping_password(service, repository):
    created = await service.save_legacy(LegacyWishListPayload(owner="지민", birthday="1999-03-14", password="pw"))
    assert created.id

    overwritten = await service.save_legacy(LegacyWishListPayload(id=created.id, owner="민지", birthday="1999-03-14"))

    assert overwritten.id == created.id
    assert overwritten.owner == "민지"
    assert overwritten.created_at == created.created_at
    assert (await repository.get(created.id)).password == "pw"

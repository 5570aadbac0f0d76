"""Tests for domain/flattener.py: embeds and stickers."""

from datetime import datetime, timezone

from relay.domain.flattener import (
    STICKER_FORMATS,
    flatten_embed,
    flatten_embeds,
    flatten_sticker,
    flatten_stickers,
    sticker_format_label,
)
from relay.ports.inbound import EmbedAuthorRef, EmbedFieldRef, EmbedRef, MediaRef, StickerRef


def _link_embed(**overrides) -> EmbedRef:
    fields = dict(
        type="link",
        title="Example",
        description="An example page",
        url="https://example.com",
        color=0x5865F2,
        timestamp=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return EmbedRef(**fields)


class TestFlattenEmbed:
    def test_scalar_fields_copied(self):
        block = flatten_embed(_link_embed())
        assert block.type == "link"
        assert block.title == "Example"
        assert block.description == "An example page"
        assert block.url == "https://example.com"
        assert block.color == 0x5865F2
        assert block.timestamp == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def test_absent_media_omitted(self):
        data = flatten_embed(_link_embed()).to_dict()
        assert "image" not in data
        assert "video" not in data
        assert "thumbnail" not in data
        assert "author" not in data
        assert data["fields"] == []

    def test_present_media_copied(self):
        embed = _link_embed(
            type="video",
            video=MediaRef(url="https://v.example/1.mp4", width=1280, height=720),
            thumbnail=MediaRef(
                url="https://i.example/t.png", proxy_url="https://media.discordapp.net/t.png",
                width=320, height=180,
            ),
        )
        data = flatten_embed(embed).to_dict()
        assert "image" not in data
        assert data["video"] == {
            "url": "https://v.example/1.mp4", "proxyUrl": None, "width": 1280, "height": 720,
        }
        assert data["thumbnail"]["proxyUrl"] == "https://media.discordapp.net/t.png"

    def test_author_and_fields(self):
        embed = _link_embed(
            type="rich",
            author=EmbedAuthorRef(name="bot", url="https://a.example", icon_url="https://a.example/i.png"),
            fields=(
                EmbedFieldRef(name="Status", value="ok", inline=True),
                EmbedFieldRef(name="Notes", value="none"),
            ),
        )
        data = flatten_embed(embed).to_dict()
        assert data["author"] == {
            "name": "bot", "url": "https://a.example", "iconUrl": "https://a.example/i.png",
        }
        assert data["fields"] == [
            {"name": "Status", "value": "ok", "inline": True},
            {"name": "Notes", "value": "none", "inline": False},
        ]

    def test_timestamp_serialized_iso(self):
        data = flatten_embed(_link_embed()).to_dict()
        assert data["timestamp"] == "2024-05-01T12:00:00+00:00"

    def test_missing_timestamp(self):
        data = flatten_embed(EmbedRef()).to_dict()
        assert data["timestamp"] is None
        assert data["type"] == "rich"


class TestFlattenEmbeds:
    def test_empty(self):
        assert flatten_embeds([]) == []

    def test_preserves_order(self):
        blocks = flatten_embeds([_link_embed(title="a"), _link_embed(title="b"), _link_embed(title="c")])
        assert [b.title for b in blocks] == ["a", "b", "c"]


class TestStickers:
    def test_format_table(self):
        assert STICKER_FORMATS == {1: "png", 2: "apng", 3: "lottie", 4: "gif"}

    def test_unknown_format(self):
        assert sticker_format_label(99) == "unknown"

    def test_flatten_sticker(self):
        sticker = flatten_sticker(StickerRef(
            id="749054660769218631",
            name="Wave",
            format_code=3,
            url="https://media.discordapp.net/stickers/749054660769218631.json",
            description="Wumpus waves hello",
            tags=("wave", "hello"),
        ))
        assert sticker.to_dict() == {
            "id": "749054660769218631",
            "name": "Wave",
            "description": "Wumpus waves hello",
            "url": "https://media.discordapp.net/stickers/749054660769218631.json",
            "format": "lottie",
            "tags": ["wave", "hello"],
        }

    def test_flatten_stickers_order_and_empty(self):
        refs = [StickerRef(id=str(i), name=f"s{i}", format_code=1, url="u") for i in range(3)]
        assert [s.name for s in flatten_stickers(refs)] == ["s0", "s1", "s2"]
        assert flatten_stickers([]) == []

"""Embed and sticker flattening: pure Python, no framework dependencies."""

from typing import Dict, Iterable, List, Optional

from relay.domain.models import EmbedAuthor, EmbedField, MediaBlock, RichContentBlock, Sticker
from relay.ports.inbound import EmbedRef, MediaRef, StickerRef

# Discord StickerFormatType wire codes
STICKER_FORMATS: Dict[int, str] = {
    1: "png",
    2: "apng",
    3: "lottie",
    4: "gif",
}


def sticker_format_label(code: int) -> str:
    return STICKER_FORMATS.get(code, "unknown")


def _media(ref: Optional[MediaRef]) -> Optional[MediaBlock]:
    if ref is None:
        return None
    return MediaBlock(url=ref.url, proxy_url=ref.proxy_url, width=ref.width, height=ref.height)


def flatten_embed(embed: EmbedRef) -> RichContentBlock:
    author = None
    if embed.author is not None:
        author = EmbedAuthor(
            name=embed.author.name,
            url=embed.author.url,
            icon_url=embed.author.icon_url,
        )
    return RichContentBlock(
        type=embed.type,
        title=embed.title,
        description=embed.description,
        url=embed.url,
        color=embed.color,
        timestamp=embed.timestamp,
        image=_media(embed.image),
        video=_media(embed.video),
        thumbnail=_media(embed.thumbnail),
        author=author,
        fields=tuple(
            EmbedField(name=f.name, value=f.value, inline=f.inline) for f in embed.fields
        ),
    )


def flatten_embeds(embeds: Iterable[EmbedRef]) -> List[RichContentBlock]:
    return [flatten_embed(e) for e in embeds]


def flatten_sticker(sticker: StickerRef) -> Sticker:
    return Sticker(
        id=sticker.id,
        name=sticker.name,
        description=sticker.description,
        url=sticker.url,
        format=sticker_format_label(sticker.format_code),
        tags=tuple(sticker.tags),
    )


def flatten_stickers(stickers: Iterable[StickerRef]) -> List[Sticker]:
    return [flatten_sticker(s) for s in stickers]

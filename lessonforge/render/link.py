# lessonforge/render/link.py
from lzstring import LZString

PLAYGROUND_URL = "https://www.typescriptlang.org/play?#code/"
LINK_TEXT = "open code in online editor"

_lz = LZString()


def to_utf16_units(text: str) -> str:
    """
    Re-express `text` as one character per UTF-16 code unit.

    lz-string in the browser compresses UTF-16 units; characters above U+FFFF
    have to be handed over as their surrogate pairs to decode back intact.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    return "".join(
        chr(int.from_bytes(data[i:i + 2], "little")) for i in range(0, len(data), 2)
    )


def encode_playground_link(code: str, base_url: str = PLAYGROUND_URL) -> str:
    """
    Build a TypeScript playground URL that opens with `code` loaded.

    The payload is lz-string's URI-safe compression, the same encoding the
    playground reads back from the '#code/' fragment. Identical input always
    yields the identical URL.
    """
    return base_url + _lz.compressToEncodedURIComponent(to_utf16_units(code))


def playground_markdown_link(code: str, base_url: str = PLAYGROUND_URL) -> str:
    return f"[{LINK_TEXT}]({encode_playground_link(code, base_url)})"

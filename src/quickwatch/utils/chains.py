"""Theater chain color-coding."""

DEFAULT_CHAIN_COLOR = "gray"

# Checked in order; the first chain whose keywords match wins.
CHAIN_COLORS: list[tuple[str, tuple[str, ...]]] = [
    ("red", ("toho", "tohoシネマズ")),
    ("orange", ("united", "ユナイテッド")),
    ("yellow", ("109", "シネマズ109")),
    ("pink", ("aeon", "イオン")),
    ("blue", ("movix", "picadilly", "piccadilly", "ピカデリー")),
    ("green", ("humax", "ヒューマックス")),
]


def chain_color(chain: str | None) -> str:
    """
    Pick the display color for a theater chain label.

    Matching is a case-insensitive substring test, so "TOHOシネマズ 新宿"
    and "toho cinemas" both map to red.

    Args:
        chain: Free-text chain label from the theater record

    Returns:
        Color key such as "red", or "gray" when no chain matches
    """
    if not chain:
        return DEFAULT_CHAIN_COLOR

    chain_lower = chain.lower()
    for color, keywords in CHAIN_COLORS:
        if any(keyword in chain_lower for keyword in keywords):
            return color

    return DEFAULT_CHAIN_COLOR

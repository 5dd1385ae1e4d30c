"""Accept header parsing for picking a response media type."""

from collections.abc import Sequence


def parse_accept(value: str | None) -> list[tuple[str, float]]:
    """Parse an Accept header into ``(media_range, q)`` pairs.

    Pairs keep header order; malformed q-values count as ``1.0``.
    """
    if not value:
        return []
    ranges: list[tuple[str, float]] = []
    for item in value.split(","):
        media, *params = (p.strip() for p in item.split(";"))
        if not media:
            continue
        q = 1.0
        for param in params:
            key, _, raw = param.partition("=")
            if key.strip().lower() == "q":
                try:
                    q = float(raw)
                except ValueError:
                    q = 1.0
        ranges.append((media.lower(), q))
    return ranges


def _matches(media_range: str, offer: str) -> bool:
    if media_range == "*/*":
        return True
    kind, _, subtype = media_range.partition("/")
    offer_kind, _, offer_subtype = offer.partition("/")
    if subtype == "*":
        return kind == offer_kind
    return kind == offer_kind and subtype == offer_subtype


def best_match(accept: str | None, offers: Sequence[str]) -> str:
    """Return the offer the client prefers most.

    The first offer is the default: it wins when the header is missing,
    matches nothing, or ties with another offer.
    """
    ranges = parse_accept(accept)
    best = offers[0]
    best_q = 0.0
    for offer in offers:
        # Most specific range wins: text/plain over text/* over */*.
        candidates = [(media, q) for media, q in ranges if _matches(media, offer)]
        if not candidates:
            continue
        _, q = max(candidates, key=lambda c: -c[0].count("*"))
        if q > best_q:
            best, best_q = offer, q
    return best

"""Unit tests for /src/engine/catalog.py"""

import pytest

from src.core.exceptions import UnknownPieceKindError
from src.core.shared_types import PieceKind
from src.engine.catalog import (
    DEFAULT_CATALOG,
    DIAGONALS,
    KNIGHT_OFFSETS,
    ORTHOGONALS,
    Compound,
    Leaper,
    PieceCatalog,
    Slider,
    Special,
    SpecialTag,
)


@pytest.mark.parametrize(
    "kind, descriptor",
    [
        (PieceKind.PAWN, Special(SpecialTag.PAWN)),
        (PieceKind.ROOK, Slider(ORTHOGONALS)),
        (PieceKind.BISHOP, Slider(DIAGONALS)),
        (PieceKind.QUEEN, Slider(ORTHOGONALS + DIAGONALS)),
        (PieceKind.KNIGHT, Special(SpecialTag.KNIGHT_JUMP)),
        (PieceKind.HERO, Special(SpecialTag.LEADER_STEP)),
        (PieceKind.WIZARD, Compound((Slider(DIAGONALS), Leaper(KNIGHT_OFFSETS)))),
        (PieceKind.LEAPER, Leaper(((2, 0), (-2, 0), (0, 2), (0, -2)))),
    ],
)
def test_standard_catalog(kind: PieceKind, descriptor: object) -> None:
    assert DEFAULT_CATALOG.lookup(kind) == descriptor
    # plain strings work just as well as the enum
    assert DEFAULT_CATALOG.lookup(kind.value) == descriptor


def test_standard_roles() -> None:
    assert DEFAULT_CATALOG.leader_kind == "H"
    assert DEFAULT_CATALOG.promotion_kind == "Q"


def test_unknown_kind() -> None:
    with pytest.raises(UnknownPieceKindError, match="'Z' is not registered"):
        DEFAULT_CATALOG.lookup("Z")


def test_unknown_kind_is_also_a_key_error() -> None:
    with pytest.raises(KeyError):
        DEFAULT_CATALOG.lookup("Z")


def test_extending_returns_a_new_catalog() -> None:
    """Adding a kind never changes the catalog other code is already using"""
    camel = Leaper(((3, 1), (1, 3), (-3, 1), (-1, 3), (3, -1), (1, -3), (-3, -1), (-1, -3)))
    extended = DEFAULT_CATALOG.extended({"C": camel})
    assert extended.lookup("C") == camel
    assert "C" in extended
    assert "C" not in DEFAULT_CATALOG
    assert set(DEFAULT_CATALOG.kinds()) < set(extended.kinds())
    assert extended.leader_kind == DEFAULT_CATALOG.leader_kind


def test_extending_can_override_a_kind() -> None:
    extended = DEFAULT_CATALOG.extended({"R": Slider(DIAGONALS)})
    assert extended.lookup("R") == Slider(DIAGONALS)
    assert DEFAULT_CATALOG.lookup("R") == Slider(ORTHOGONALS)


def test_with_roles() -> None:
    catalog = DEFAULT_CATALOG.with_roles(leader_kind="Q", promotion_kind="W")
    assert catalog.leader_kind == "Q"
    assert catalog.promotion_kind == "W"
    assert catalog.kinds() == DEFAULT_CATALOG.kinds()


def test_roles_cannot_be_reassigned() -> None:
    """The default catalog is shared by every caller: its roles only change through with_roles()"""
    with pytest.raises(AttributeError):
        DEFAULT_CATALOG.leader_kind = "Q"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        DEFAULT_CATALOG.promotion_kind = "W"  # type: ignore[misc]
    assert DEFAULT_CATALOG.leader_kind == "H"
    assert DEFAULT_CATALOG.promotion_kind == "Q"


def test_promotion_kind_must_exist() -> None:
    with pytest.raises(UnknownPieceKindError):
        PieceCatalog({"P": Special(SpecialTag.PAWN)}, promotion_kind="Q")


def test_is_pawn() -> None:
    assert DEFAULT_CATALOG.is_pawn("P")
    assert not DEFAULT_CATALOG.is_pawn("Q")
    assert not DEFAULT_CATALOG.is_pawn("Z")
    # any kind described as the pawn special counts
    extended = DEFAULT_CATALOG.extended({"F": Special(SpecialTag.PAWN)})
    assert extended.is_pawn("F")

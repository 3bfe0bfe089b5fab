from bead_pattern.palette import HexResolver, PaletteResolver


def test_hex_resolver_labels() -> None:
    resolver = HexResolver()
    assert resolver.display_key("#a0b1c2", "hex") == "A0B1C2"
    assert resolver.key_for_hex("#a0b1c2", "hex") == "#A0B1C2"


def test_palette_resolver_lookup_is_case_insensitive() -> None:
    resolver = PaletteResolver({"MARD": {"#ff0000": "A1", "#0000FF": "B12"}})
    assert resolver.display_key("#FF0000", "MARD") == "A1"
    assert resolver.key_for_hex("#0000ff", "MARD") == "B12"


def test_palette_resolver_fallback() -> None:
    resolver = PaletteResolver({"MARD": {"#FF0000": "A1"}}, fallback="-")
    assert resolver.display_key("#00FF00", "MARD") == "-"
    assert resolver.display_key("#FF0000", "COCO") == "-"

"""Color Name Table - Static Reference Data.

This module is the single source of truth for named colors. The table is
the CSS named color list, built once at import and never mutated.

## Lookups

Two read-only maps are derived from the table:

- `NAME_TO_HEX`: lowercase name -> six lowercase hex digits (no '#')
- `HEX_TO_NAME`: six lowercase hex digits -> first name in table order

Several CSS names are aliases that share a value (`aqua`/`cyan`,
`fuchsia`/`magenta` and every `gray`/`grey` pair). For those, a hex lookup
returns the entry that appears first in `COLOR_NAMES`.

Example:
    ```python
    from colorconversion.colors import NAME_TO_HEX, HEX_TO_NAME

    NAME_TO_HEX["deepskyblue"]  # "00bfff"
    HEX_TO_NAME["00ffff"]       # "aqua"
    ```

## Adding New Colors

Append a `NameColor` to `COLOR_NAMES`. Names are stored lowercase and
`hex_value` accepts an optional leading '#'.
"""

from types import MappingProxyType

from colorconversion.models import NameColor


COLOR_NAMES: tuple[NameColor, ...] = (
    NameColor(name="aliceblue", hex_value="f0f8ff"),
    NameColor(name="antiquewhite", hex_value="faebd7"),
    NameColor(name="aqua", hex_value="00ffff"),
    NameColor(name="aquamarine", hex_value="7fffd4"),
    NameColor(name="azure", hex_value="f0ffff"),
    NameColor(name="beige", hex_value="f5f5dc"),
    NameColor(name="bisque", hex_value="ffe4c4"),
    NameColor(name="black", hex_value="000000"),
    NameColor(name="blanchedalmond", hex_value="ffebcd"),
    NameColor(name="blue", hex_value="0000ff"),
    NameColor(name="blueviolet", hex_value="8a2be2"),
    NameColor(name="brown", hex_value="a52a2a"),
    NameColor(name="burlywood", hex_value="deb887"),
    NameColor(name="cadetblue", hex_value="5f9ea0"),
    NameColor(name="chartreuse", hex_value="7fff00"),
    NameColor(name="chocolate", hex_value="d2691e"),
    NameColor(name="coral", hex_value="ff7f50"),
    NameColor(name="cornflowerblue", hex_value="6495ed"),
    NameColor(name="cornsilk", hex_value="fff8dc"),
    NameColor(name="crimson", hex_value="dc143c"),
    NameColor(name="cyan", hex_value="00ffff"),
    NameColor(name="darkblue", hex_value="00008b"),
    NameColor(name="darkcyan", hex_value="008b8b"),
    NameColor(name="darkgoldenrod", hex_value="b8860b"),
    NameColor(name="darkgray", hex_value="a9a9a9"),
    NameColor(name="darkgreen", hex_value="006400"),
    NameColor(name="darkgrey", hex_value="a9a9a9"),
    NameColor(name="darkkhaki", hex_value="bdb76b"),
    NameColor(name="darkmagenta", hex_value="8b008b"),
    NameColor(name="darkolivegreen", hex_value="556b2f"),
    NameColor(name="darkorange", hex_value="ff8c00"),
    NameColor(name="darkorchid", hex_value="9932cc"),
    NameColor(name="darkred", hex_value="8b0000"),
    NameColor(name="darksalmon", hex_value="e9967a"),
    NameColor(name="darkseagreen", hex_value="8fbc8f"),
    NameColor(name="darkslateblue", hex_value="483d8b"),
    NameColor(name="darkslategray", hex_value="2f4f4f"),
    NameColor(name="darkslategrey", hex_value="2f4f4f"),
    NameColor(name="darkturquoise", hex_value="00ced1"),
    NameColor(name="darkviolet", hex_value="9400d3"),
    NameColor(name="deeppink", hex_value="ff1493"),
    NameColor(name="deepskyblue", hex_value="00bfff"),
    NameColor(name="dimgray", hex_value="696969"),
    NameColor(name="dimgrey", hex_value="696969"),
    NameColor(name="dodgerblue", hex_value="1e90ff"),
    NameColor(name="firebrick", hex_value="b22222"),
    NameColor(name="floralwhite", hex_value="fffaf0"),
    NameColor(name="forestgreen", hex_value="228b22"),
    NameColor(name="fuchsia", hex_value="ff00ff"),
    NameColor(name="gainsboro", hex_value="dcdcdc"),
    NameColor(name="ghostwhite", hex_value="f8f8ff"),
    NameColor(name="gold", hex_value="ffd700"),
    NameColor(name="goldenrod", hex_value="daa520"),
    NameColor(name="gray", hex_value="808080"),
    NameColor(name="green", hex_value="008000"),
    NameColor(name="greenyellow", hex_value="adff2f"),
    NameColor(name="grey", hex_value="808080"),
    NameColor(name="honeydew", hex_value="f0fff0"),
    NameColor(name="hotpink", hex_value="ff69b4"),
    NameColor(name="indianred", hex_value="cd5c5c"),
    NameColor(name="indigo", hex_value="4b0082"),
    NameColor(name="ivory", hex_value="fffff0"),
    NameColor(name="khaki", hex_value="f0e68c"),
    NameColor(name="lavender", hex_value="e6e6fa"),
    NameColor(name="lavenderblush", hex_value="fff0f5"),
    NameColor(name="lawngreen", hex_value="7cfc00"),
    NameColor(name="lemonchiffon", hex_value="fffacd"),
    NameColor(name="lightblue", hex_value="add8e6"),
    NameColor(name="lightcoral", hex_value="f08080"),
    NameColor(name="lightcyan", hex_value="e0ffff"),
    NameColor(name="lightgoldenrodyellow", hex_value="fafad2"),
    NameColor(name="lightgray", hex_value="d3d3d3"),
    NameColor(name="lightgreen", hex_value="90ee90"),
    NameColor(name="lightgrey", hex_value="d3d3d3"),
    NameColor(name="lightpink", hex_value="ffb6c1"),
    NameColor(name="lightsalmon", hex_value="ffa07a"),
    NameColor(name="lightseagreen", hex_value="20b2aa"),
    NameColor(name="lightskyblue", hex_value="87cefa"),
    NameColor(name="lightslategray", hex_value="778899"),
    NameColor(name="lightslategrey", hex_value="778899"),
    NameColor(name="lightsteelblue", hex_value="b0c4de"),
    NameColor(name="lightyellow", hex_value="ffffe0"),
    NameColor(name="lime", hex_value="00ff00"),
    NameColor(name="limegreen", hex_value="32cd32"),
    NameColor(name="linen", hex_value="faf0e6"),
    NameColor(name="magenta", hex_value="ff00ff"),
    NameColor(name="maroon", hex_value="800000"),
    NameColor(name="mediumaquamarine", hex_value="66cdaa"),
    NameColor(name="mediumblue", hex_value="0000cd"),
    NameColor(name="mediumorchid", hex_value="ba55d3"),
    NameColor(name="mediumpurple", hex_value="9370db"),
    NameColor(name="mediumseagreen", hex_value="3cb371"),
    NameColor(name="mediumslateblue", hex_value="7b68ee"),
    NameColor(name="mediumspringgreen", hex_value="00fa9a"),
    NameColor(name="mediumturquoise", hex_value="48d1cc"),
    NameColor(name="mediumvioletred", hex_value="c71585"),
    NameColor(name="midnightblue", hex_value="191970"),
    NameColor(name="mintcream", hex_value="f5fffa"),
    NameColor(name="mistyrose", hex_value="ffe4e1"),
    NameColor(name="moccasin", hex_value="ffe4b5"),
    NameColor(name="navajowhite", hex_value="ffdead"),
    NameColor(name="navy", hex_value="000080"),
    NameColor(name="oldlace", hex_value="fdf5e6"),
    NameColor(name="olive", hex_value="808000"),
    NameColor(name="olivedrab", hex_value="6b8e23"),
    NameColor(name="orange", hex_value="ffa500"),
    NameColor(name="orangered", hex_value="ff4500"),
    NameColor(name="orchid", hex_value="da70d6"),
    NameColor(name="palegoldenrod", hex_value="eee8aa"),
    NameColor(name="palegreen", hex_value="98fb98"),
    NameColor(name="paleturquoise", hex_value="afeeee"),
    NameColor(name="palevioletred", hex_value="db7093"),
    NameColor(name="papayawhip", hex_value="ffefd5"),
    NameColor(name="peachpuff", hex_value="ffdab9"),
    NameColor(name="peru", hex_value="cd853f"),
    NameColor(name="pink", hex_value="ffc0cb"),
    NameColor(name="plum", hex_value="dda0dd"),
    NameColor(name="powderblue", hex_value="b0e0e6"),
    NameColor(name="purple", hex_value="800080"),
    NameColor(name="rebeccapurple", hex_value="663399"),
    NameColor(name="red", hex_value="ff0000"),
    NameColor(name="rosybrown", hex_value="bc8f8f"),
    NameColor(name="royalblue", hex_value="4169e1"),
    NameColor(name="saddlebrown", hex_value="8b4513"),
    NameColor(name="salmon", hex_value="fa8072"),
    NameColor(name="sandybrown", hex_value="f4a460"),
    NameColor(name="seagreen", hex_value="2e8b57"),
    NameColor(name="seashell", hex_value="fff5ee"),
    NameColor(name="sienna", hex_value="a0522d"),
    NameColor(name="silver", hex_value="c0c0c0"),
    NameColor(name="skyblue", hex_value="87ceeb"),
    NameColor(name="slateblue", hex_value="6a5acd"),
    NameColor(name="slategray", hex_value="708090"),
    NameColor(name="slategrey", hex_value="708090"),
    NameColor(name="snow", hex_value="fffafa"),
    NameColor(name="springgreen", hex_value="00ff7f"),
    NameColor(name="steelblue", hex_value="4682b4"),
    NameColor(name="tan", hex_value="d2b48c"),
    NameColor(name="teal", hex_value="008080"),
    NameColor(name="thistle", hex_value="d8bfd8"),
    NameColor(name="tomato", hex_value="ff6347"),
    NameColor(name="turquoise", hex_value="40e0d0"),
    NameColor(name="violet", hex_value="ee82ee"),
    NameColor(name="wheat", hex_value="f5deb3"),
    NameColor(name="white", hex_value="ffffff"),
    NameColor(name="whitesmoke", hex_value="f5f5f5"),
    NameColor(name="yellow", hex_value="ffff00"),
    NameColor(name="yellowgreen", hex_value="9acd32"),
)


def _build_hex_index(entries: tuple[NameColor, ...]) -> dict[str, str]:
    index: dict[str, str] = {}
    for entry in entries:
        # First entry wins for aliases sharing a value
        index.setdefault(entry.hex_value, entry.name)
    return index


NAME_TO_HEX = MappingProxyType({entry.name: entry.hex_value for entry in COLOR_NAMES})
HEX_TO_NAME = MappingProxyType(_build_hex_index(COLOR_NAMES))


__all__ = ["COLOR_NAMES", "HEX_TO_NAME", "NAME_TO_HEX"]

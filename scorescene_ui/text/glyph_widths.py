"""SMuFL glyph advance widths (Bravura metadata), in staff spaces.

One em is four staff spaces, so a glyph's pixel advance is
`width * font_size_px / 4`.
"""

from __future__ import annotations

from typing import Mapping


GLYPH_ADVANCE_WIDTHS: Mapping[int, float] = {
    # accidentals
    0xE262: 0.996,
    0xE260: 0.904,
    0xE261: 0.672,
    0xE263: 1.0,
    0xE264: 1.652,
    0xE26A: 1.268,
    0xE280: 0.908,
    0xE282: 0.716,
    0xE265: 1.652,
    0xE266: 1.376,
    0xE267: 0.996,
    0xE268: 0.996,
    0xE269: 2.076,
    0xE26C: 0.564,
    0xE26D: 0.564,
    0xE26E: 0.308,
    0xE26F: 0.308,
    0xE270: 0.904,
    0xE275: 1.044,
    0xE272: 0.76,
    # noteheads
    0xE0A0: 1.18,
    0xE0A1: 1.18,
    0xE0A2: 1.18,
    0xE0A3: 1.18,
    0xE0A4: 1.18,
    0xE0A9: 1.328,
    0xE0AA: 1.328,
    0xE0AB: 1.12,
    0xE0D8: 1.128,
    0xE0D9: 1.128,
    0xE0DB: 0.996,
    0xE0BC: 1.312,
    0xE0BD: 1.312,
    0xE0BE: 1.12,
    0xE100: 1.688,
    0xE101: 1.688,
    0xE102: 1.552,
    0xE103: 1.552,
    # clefs
    0xE050: 2.684,
    0xE05C: 2.536,
    0xE062: 2.756,
    0xE06A: 1.14,
    0xE06B: 1.14,
    0xE06D: 1.636,
    0xE06E: 1.084,
    0xE07A: 1.792,
    0xE07B: 1.692,
    0xE07C: 1.836,
    # time signatures
    0xE080: 1.688,
    0xE081: 1.084,
    0xE082: 1.44,
    0xE083: 1.356,
    0xE084: 1.52,
    0xE085: 1.356,
    0xE086: 1.44,
    0xE087: 1.316,
    0xE088: 1.44,
    0xE089: 1.44,
    0xE08A: 2.0,
    0xE08B: 2.0,
    0xE08C: 1.0,
    0xE08E: 0.752,
    0xE097: 1.64,
    0xE098: 1.64,
    # rests
    0xE4E1: 2.352,
    0xE4E2: 1.176,
    0xE4E3: 1.0,
    0xE4E4: 1.0,
    0xE4E5: 1.0,
    0xE4E6: 0.752,
    0xE4E7: 1.0,
    0xE4E8: 1.112,
    0xE4E9: 1.352,
    0xE4EA: 1.496,
    0xE4EB: 1.652,
    0xE4EC: 1.892,
    0xE4ED: 2.132,
    0xE4EE: 2.288,
    # flags
    0xE240: 0.796,
    0xE241: 1.0,
    0xE242: 0.796,
    0xE243: 1.0,
    0xE244: 0.896,
    0xE245: 1.0,
    0xE246: 0.896,
    0xE247: 1.0,
    0xE248: 0.896,
    0xE249: 1.0,
    0xE24A: 0.896,
    0xE24B: 1.0,
    0xE24C: 0.896,
    0xE24D: 1.0,
    0xE24E: 0.896,
    0xE24F: 1.0,
    0xE250: 0.748,
    0xE251: 1.08,
    0xE252: 0.748,
    0xE253: 1.08,
    0xE254: 0.748,
    0xE255: 1.08,
    # articulations
    0xE4A0: 0.668,
    0xE4A1: 0.668,
    0xE4A2: 0.472,
    0xE4A3: 0.472,
    0xE4A4: 0.472,
    0xE4A5: 0.472,
    0xE4A6: 0.472,
    0xE4A7: 0.472,
    0xE4A8: 0.388,
    0xE4A9: 0.388,
    0xE4AA: 0.532,
    0xE4AB: 0.532,
    0xE4AC: 0.668,
    0xE4AD: 0.668,
    0xE4AE: 0.668,
    0xE4AF: 0.668,
    0xE4B0: 0.668,
    0xE4B1: 0.668,
    0xE4B2: 0.472,
    0xE4B3: 0.472,
    0xE4B4: 0.472,
    0xE4B5: 0.472,
    0xE4B6: 0.668,
    0xE4B7: 0.668,
    0xE4B8: 0.668,
    0xE4B9: 0.668,
    # dynamics
    0xE520: 1.164,
    0xE521: 1.236,
    0xE522: 1.264,
    0xE523: 1.168,
    0xE524: 0.936,
    0xE525: 1.236,
    0xE526: 0.868,
    # ornaments
    0xE560: 1.804,
    0xE566: 1.384,
    0xE567: 1.384,
    0xE568: 1.5,
    0xE569: 1.5,
    0xE56C: 1.132,
    0xE56D: 1.544,
    0xE56E: 2.0,
    0xE587: 1.384,
    # holds and pauses
    0xE4C0: 1.896,
    0xE4C1: 1.896,
    0xE4C2: 1.556,
    0xE4C3: 1.556,
    0xE4C4: 2.32,
    0xE4C5: 2.32,
    0xE4C6: 2.32,
    0xE4C7: 2.32,
    0xE4D1: 1.0,
    0xE4D2: 0.768,
    0xE4D3: 0.528,
    0xE4D5: 1.24,
    0xE4D6: 1.24,
    # repeats
    0xE040: 0.5,
    0xE046: 1.624,
    0xE047: 1.808,
    0xE048: 2.572,
    # barlines
    0xE030: 0.16,
    0xE031: 0.64,
    0xE032: 0.64,
    # dots
    0xE1E7: 0.4,
    # stems
    0xE210: 0.0,
    # ties and slurs
    0xE1FD: 0.3,
    0xE1FE: 0.6,
    0xE1FF: 0.9,
    # tuplet numbers
    0xE880: 0.708,
    0xE881: 0.464,
    0xE882: 0.616,
    0xE883: 0.58,
    0xE884: 0.652,
    0xE885: 0.58,
    0xE886: 0.616,
    0xE887: 0.56,
    0xE888: 0.616,
    0xE889: 0.616,
    0xE88A: 0.32,
    # pedal marks
    0xE650: 2.856,
    0xE655: 1.364,
    # tremolos
    0xE220: 0.952,
    0xE221: 0.952,
    0xE222: 0.952,
    0xE223: 0.952,
    0xE224: 0.952,
    0xE225: 1.064,
    0xE226: 1.56,
    0xE227: 2.064,
    0xE228: 2.56,
    # string techniques
    0xE610: 0.84,
    0xE612: 0.752,
    0xE614: 0.804,
    # brass techniques
    0xE5E0: 1.056,
    0xE5D0: 1.436,
    0xE5D1: 1.224,
    # octave lines
    0xE510: 1.424,
    0xE511: 1.076,
    0xE512: 1.176,
    0xE513: 2.272,
    0xE514: 1.924,
    0xE515: 2.024,
    # noteheads parentheses
    0xE0F5: 0.38,
    0xE0F6: 0.38,
}

#!/usr/bin/env python3
# Copyright (C) 2026  Lesco Design & Mfg. Co., Inc.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""
Cut List Optimizer: Guillotine 2-D Packing + SVG Layout
=========================================================
Lays out rectangular cut pieces on a single stock sheet (plywood, MDF,
melamine panels...) and reports what could not be placed and how much
material is wasted.

Architecture
------------
  parse_csv()          Read the cut list (width, height, quantity) from CSV.
  expand_cuts()        Unroll quantities into one Cut per physical piece.
  GuillotinePacker     Greedy best-fit guillotine packing with saw kerf.
  SVGGenerator         Render a Layout to an SVG with three named layers
                         (back to front):
                         stock  : the raw sheet
                         pieces : one coloured rectangle per placed cut
                         labels : "WxH" caption for every placed cut

Usage
-----
    python cutlist.py CUTS.csv
    python cutlist.py CUTS.csv 1220 2440
    python cutlist.py CUTS.csv 1220 2440 --kerf 4 -o output/panel.svg

Input CSV Format
----------------
    "WIDTH(mm)";"HEIGHT(mm)";"QUANTITY"
    QUANTITY is optional and defaults to 1.

Dependencies
------------
    Required : svgwrite
"""

import argparse
import configparser
import csv
import os
import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

import svgwrite

# ============================================================================
# CONFIGURATION
# ============================================================================

CONFIG_FILENAME = "cutlist.ini"

DEFAULT_CONFIG = {
    'sheet': {
        'width': '1220',
        'height': '2440',
        'kerf': '3',
    },
    'colors': {
        'stock': '#f0f0f0',
        'outline': '#000000',
        'text': '#000000',
        'palette': '#ff6b6b, #4ecdc4, #45b7d1, #f9c74f, #90be6d',
    },
    'font': {
        'name': 'Arial',
        'size': '10',
    },
    'limits': {
        'max_pieces': '10000',
    },
}


def load_config(path: Optional[str] = None) -> configparser.ConfigParser:
    """
    Build the runtime configuration.

    Built-in defaults are loaded first and then overridden by the INI
    file.  When *path* is omitted, ``cutlist.ini`` next to this module is
    used if it exists; its absence is not an error.

    Parameters
    ----------
    path : Explicit INI file to read.  Must exist when given.

    Returns
    -------
    ConfigParser with the sections sheet, colors, font and limits.

    Raises
    ------
    FileNotFoundError
        If an explicit *path* does not exist.
    """
    cfg = configparser.ConfigParser()
    cfg.read_dict(DEFAULT_CONFIG)

    if path is None:
        path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                            CONFIG_FILENAME)
        if not os.path.exists(path):
            return cfg
    elif not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    cfg.read(path, encoding='utf-8')
    print(f"  → Loaded config: {path}")
    return cfg


def _palette(cfg: configparser.ConfigParser) -> List[str]:
    colors = [c.strip() for c in cfg.get('colors', 'palette').split(',')]
    return [c for c in colors if c]


CFG = load_config()

# ============================================================================
# DATA STRUCTURES
# ============================================================================

@dataclass(frozen=True)
class Cut:
    """
    One physical piece to be cut from the stock sheet.

    Attributes
    ----------
    width  : Piece width in sheet units (mm).
    height : Piece height in sheet units (mm).
    """

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass
class CutSpec:
    """
    One line of the cut list: a piece size and how many are required.

    Attributes
    ----------
    width    : Piece width in mm.
    height   : Piece height in mm.
    quantity : Number of identical pieces required.
    """

    width: float
    height: float
    quantity: int = 1

    def expand(self) -> List[Cut]:
        """Return one Cut per required piece (empty for quantity <= 0)."""
        return [Cut(self.width, self.height) for _ in range(self.quantity)]


@dataclass(frozen=True)
class Stock:
    """Raw sheet to cut from; origin fixed at the top-left corner (0, 0)."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Space:
    """
    Unused rectangular region of the sheet still available for a cut.

    Attributes
    ----------
    x, y   : Top-left corner in mm.
    width  : Region width in mm (may be <= 0 once kerf is subtracted).
    height : Region height in mm.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def is_usable(self) -> bool:
        return self.width > 0 and self.height > 0

    def fits(self, cut: Cut) -> bool:
        return cut.width <= self.width and cut.height <= self.height


@dataclass(frozen=True)
class PlacedCut:
    """
    A cut positioned on the stock sheet.

    Attributes
    ----------
    cut : The piece being placed, exactly as it was requested.
    x   : Left-edge X coordinate in mm (sheet origin at top-left).
    y   : Top-edge Y coordinate in mm.
    """

    cut: Cut
    x: float
    y: float

    @property
    def width(self) -> float:
        return self.cut.width

    @property
    def height(self) -> float:
        return self.cut.height

    @property
    def area(self) -> float:
        return self.cut.width * self.cut.height


@dataclass
class Layout:
    """
    Outcome of packing one cut list onto one stock sheet.

    Attributes
    ----------
    stock    : The sheet that was cut.
    kerf     : Saw blade width used for the run.
    placed   : Placements in the order they were made.
    unplaced : Pieces that did not fit, in residual (area-sorted) order.
    """

    stock: Stock
    kerf: float
    placed: List[PlacedCut] = field(default_factory=list)
    unplaced: List[Cut] = field(default_factory=list)

    @property
    def used_area(self) -> float:
        return sum(p.area for p in self.placed)

    @property
    def waste_area(self) -> float:
        """Sheet area not covered by a placed piece (kerf strips included)."""
        return self.stock.area - self.used_area

    @property
    def waste_percentage(self) -> float:
        """Waste as a percentage of the sheet, rounded to two decimals."""
        total_area = self.stock.area
        if total_area <= 0:
            return 0.0
        return round(self.waste_area / total_area * 100, 2)

    @property
    def efficiency(self) -> float:
        """
        Material utilisation as a percentage [0, 100].

        Sum of placed piece areas divided by the sheet area.  Kerf losses
        count as waste.
        """
        total_area = self.stock.area
        return (self.used_area / total_area * 100) if total_area > 0 else 0.0

    @property
    def is_complete(self) -> bool:
        return not self.unplaced

    def shortfall_message(self) -> Optional[str]:
        """Warning shown to the operator when pieces were left over."""
        count = len(self.unplaced)
        if count == 0:
            return None
        return (f"{count} cut{'s' if count > 1 else ''} could not be placed "
                f"in the current layout. Consider adjusting your cut sizes "
                f"or stock dimensions.")


# ============================================================================
# GUILLOTINE PACKER
# ============================================================================

class GuillotinePacker:
    """
    Greedy guillotine packing of cuts onto a single stock sheet.

    Algorithm overview
    ------------------
    1. Sort all cuts by area, largest first (stable, so equal areas keep
       their input order).
    2. Starting with the whole sheet as the only free space, pick the
       largest remaining cut that fits the space and place it at the
       space's top-left corner.
    3. Split what is left of the space with two guillotine cuts into a
       *right* space (beside the piece, as tall as the piece) and a
       *bottom* space (below the piece, full width).  The saw kerf is
       subtracted between the piece and each neighbour.
    4. Fill the right space completely (depth-first) before the bottom
       space.  Spaces that no remaining cut fits are dropped.

    Pieces are never rotated and only one sheet is used; whatever does
    not fit is reported as unplaced.  The packer does no validation and
    never raises: cuts with odd dimensions simply fail the fit test.

    Free spaces are kept on an explicit LIFO stack rather than the call
    stack, so very long cut lists cannot hit the interpreter's recursion
    limit.
    """

    def __init__(self, stock_width: float, stock_height: float,
                 kerf: float = 0.0) -> None:
        """
        Parameters
        ----------
        stock_width  : Sheet width in mm.
        stock_height : Sheet height in mm.
        kerf         : Saw blade width in mm, lost on every cut.
        """
        self.stock = Stock(stock_width, stock_height)
        self.kerf = kerf

    def pack(self, cuts: Iterable[Cut]) -> Layout:
        """
        Place as many of *cuts* as possible on the sheet.

        Parameters
        ----------
        cuts : One entry per physical piece (quantities already expanded).
               The caller's sequence is not modified.

        Returns
        -------
        Layout with the placements and the unplaced remainder.
        """
        pool = sorted(cuts, key=lambda c: c.width * c.height, reverse=True)
        placed: List[PlacedCut] = []

        stack = [Space(0, 0, self.stock.width, self.stock.height)]
        while stack and pool:
            space = stack.pop()

            index = self._find_best_cut(space, pool)
            if index is None:
                continue

            cut = pool.pop(index)
            placed.append(PlacedCut(cut, space.x, space.y))

            right, bottom = self._split(space, cut)
            # Pushed in reverse so the right space is expanded first
            if bottom.is_usable:
                stack.append(bottom)
            if right.is_usable:
                stack.append(right)

        return Layout(stock=self.stock, kerf=self.kerf,
                      placed=placed, unplaced=pool)

    def _find_best_cut(self, space: Space, pool: Sequence[Cut]) -> Optional[int]:
        """
        Return the index of the largest cut in *pool* that fits *space*.

        The whole pool is scanned.  On equal area the first candidate
        wins.  Returns None when nothing fits.
        """
        best_index = None
        best_area = float('-inf')

        for i, cut in enumerate(pool):
            if space.fits(cut):
                area = cut.width * cut.height
                if area > best_area:
                    best_area = area
                    best_index = i

        return best_index

    def _split(self, space: Space, cut: Cut) -> Tuple[Space, Space]:
        """
        Split the remainder of *space* after placing *cut* at its origin.

        Returns
        -------
        (right, bottom) spaces.  Either may have a non-positive side when
        the kerf eats the remaining material.
        """
        right = Space(
            x=space.x + cut.width + self.kerf,
            y=space.y,
            width=space.width - cut.width - self.kerf,
            height=cut.height,
        )
        bottom = Space(
            x=space.x,
            y=space.y + cut.height + self.kerf,
            width=space.width,
            height=space.height - cut.height - self.kerf,
        )
        return right, bottom


def pack(stock: Stock, requests: Sequence[Cut],
         kerf: float) -> Tuple[List[PlacedCut], List[Cut]]:
    """Pack *requests* onto *stock* and return ``(placed, unplaced)``."""
    layout = GuillotinePacker(stock.width, stock.height, kerf).pack(requests)
    return layout.placed, layout.unplaced


# ============================================================================
# CUT LIST HANDLING
# ============================================================================

def expand_cuts(specs: Iterable[CutSpec]) -> List[Cut]:
    """Unroll cut-list quantities into one Cut per piece, in list order."""
    cuts: List[Cut] = []
    for spec in specs:
        cuts.extend(spec.expand())
    return cuts


def validate_inputs(stock: Stock, kerf: float, specs: Sequence[CutSpec],
                    max_pieces: Optional[int] = None) -> None:
    """
    Reject inputs the optimiser should never be asked to lay out.

    Parameters
    ----------
    stock      : Sheet dimensions; both must be positive.
    kerf       : Blade width; must not be negative.
    specs      : Cut-list lines; width, height and quantity must be positive.
    max_pieces : Upper bound on the expanded piece count.  Defaults to
                 ``[limits] max_pieces`` from the loaded configuration.

    Raises
    ------
    ValueError
        Describing the first offending value.
    """
    if max_pieces is None:
        max_pieces = CFG.getint('limits', 'max_pieces')

    if stock.width <= 0 or stock.height <= 0:
        raise ValueError(f"Stock dimensions must be positive, "
                         f"got {_fmt(stock.width)} x {_fmt(stock.height)}")
    if kerf < 0:
        raise ValueError(f"Kerf must not be negative, got {_fmt(kerf)}")

    for n, spec in enumerate(specs, start=1):
        if spec.width <= 0 or spec.height <= 0:
            raise ValueError(f"Cut #{n} has non-positive dimensions: "
                             f"{_fmt(spec.width)} x {_fmt(spec.height)}")
        if spec.quantity <= 0:
            raise ValueError(f"Cut #{n} has non-positive quantity: "
                             f"{spec.quantity}")

    total = sum(spec.quantity for spec in specs)
    if total > max_pieces:
        raise ValueError(f"Too many pieces: {total} (limit {max_pieces})")


def optimize_cuts(specs: Iterable[CutSpec], stock: Stock,
                  kerf: float) -> Layout:
    """Expand *specs* and pack them onto *stock* with the given *kerf*."""
    packer = GuillotinePacker(stock.width, stock.height, kerf)
    return packer.pack(expand_cuts(specs))


# ============================================================================
# CSV PARSER
# ============================================================================

def parse_csv(filename: str) -> List[CutSpec]:
    """
    Parse a CSV cut list into CutSpec objects.

    The delimiter and quote character are detected automatically via
    ``csv.Sniffer``.  If sniffing fails the function falls back to
    semicolons (;) with double-quote (") quoting.

    The CSV must have a header row with the following columns (aliases
    accepted, case-insensitive):

    ========  =====================================================
    Column    Aliases
    ========  =====================================================
    WIDTH     WIDTH(MM), CUT WIDTH, CUT WIDTH(MM), W
    HEIGHT    HEIGHT(MM), CUT HEIGHT, CUT HEIGHT(MM), H, LENGTH
    QUANTITY  QTY, COUNT  (optional, defaults to 1)
    ========  =====================================================

    Rows that cannot be parsed, or that have a non-positive width,
    height or quantity, are skipped with a warning.

    Parameters
    ----------
    filename : Path to the input CSV file (UTF-8 encoded).

    Returns
    -------
    List of CutSpec objects; empty if the file is empty or the required
    columns are absent.
    """
    specs = []

    with open(filename, 'r', encoding='utf-8') as f:
        # ── Auto-detect dialect ───────────────────────────────────────
        sample = f.read(4096)
        f.seek(0)
        delimiter = ';'
        quotechar = '"'
        try:
            detected = csv.Sniffer().sniff(sample, delimiters=',;\t|')
            delimiter = detected.delimiter
            quotechar = detected.quotechar or '"'
            print(f"  → Detected CSV dialect: delimiter={delimiter!r} "
                  f"quotechar={quotechar!r}")
        except csv.Error:
            print("  ⚠️  Warning: CSV dialect detection failed.")
            print(f"  ↩  Falling back to default: delimiter={delimiter!r}  "
                  f"quotechar={quotechar!r}")

        reader = csv.reader(f,
                            delimiter=delimiter,
                            quotechar=quotechar,
                            doublequote=True,
                            skipinitialspace=True)

        header = next(reader, None)
        if not header:
            print("Error: Empty CSV file")
            return []

        header = [h.strip().strip('"').upper() for h in header]
        field_map = {name: i for i, name in enumerate(header)}

        column_aliases = {
            'WIDTH': ['WIDTH', 'WIDTH(MM)', 'CUT WIDTH', 'CUT WIDTH(MM)', 'W'],
            'HEIGHT': ['HEIGHT', 'HEIGHT(MM)', 'CUT HEIGHT', 'CUT HEIGHT(MM)',
                       'H', 'LENGTH'],
            'QUANTITY': ['QUANTITY', 'QTY', 'COUNT'],
        }
        required = ('WIDTH', 'HEIGHT')

        indices = {}
        for key, possible_names in column_aliases.items():
            for name in possible_names:
                if name in field_map:
                    indices[key] = field_map[name]
                    break
            if key in required and key not in indices:
                print(f"Error: Required field not found. "
                      f"Looking for one of: {possible_names}")
                print(f"Available fields: {header}")
                return []

        row_num = 1
        for row in reader:
            row_num += 1

            if not row or all(not cell.strip() for cell in row):
                continue

            try:
                width = float(row[indices['WIDTH']].strip())
                height = float(row[indices['HEIGHT']].strip())
                quantity = 1
                if 'QUANTITY' in indices:
                    quantity = int(row[indices['QUANTITY']].strip())
            except (ValueError, IndexError) as e:
                print(f"Warning: Skipping invalid row {row_num}: {e}")
                print(f"  Row data: {row}")
                continue

            if width <= 0 or height <= 0 or quantity <= 0:
                print(f"Warning: Skipping row {row_num}: width, height and "
                      f"quantity must be positive")
                continue

            specs.append(CutSpec(width=width, height=height, quantity=quantity))
            print(f"  Row {row_num}: {quantity}x {_fmt(width)}x{_fmt(height)}mm")

    return specs


# ============================================================================
# SVGGenerator
# ============================================================================

def _fmt(value: float) -> str:
    """Format a dimension without a trailing '.0' for whole numbers."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:g}"


class SVGGenerator:
    """
    Render a packed Layout as an SVG cutting diagram.

    The generated SVG contains three named groups in draw order (back to
    front):

    =========  ==================================================
    Group id   Content
    =========  ==================================================
    stock      One rectangle covering the full sheet.
    pieces     One filled rectangle per placed cut, coloured from
               the configured palette in placement order.
    labels     "WxH" caption near the top-left of every piece.
    =========  ==================================================

    A metadata comment with the waste figures follows the XML
    declaration.
    """

    def __init__(self, layout: Layout,
                 cfg: Optional[configparser.ConfigParser] = None) -> None:
        """
        Parameters
        ----------
        layout : The packed sheet to render.
        cfg    : Colour and font configuration (defaults to CFG).
        """
        self.layout = layout
        self.cfg = cfg if cfg is not None else CFG
        self.palette = _palette(self.cfg) or ['#cccccc']
        self.font_size = self.cfg.getfloat('font', 'size')

    def generate(self) -> str:
        """Render the layout and return the SVG document as a string."""
        stock = self.layout.stock
        width, height = _fmt(stock.width), _fmt(stock.height)

        dwg = svgwrite.Drawing(size=(f"{width}mm", f"{height}mm"),
                               viewBox=f"0 0 {width} {height}")

        outline = self.cfg.get('colors', 'outline')
        style_text = f"""
            .stock {{ fill: {self.cfg.get('colors', 'stock')}; stroke: {outline}; stroke-width: 1; }}
            .piece {{ stroke: {outline}; stroke-width: 1; }}
            .label {{ font-family: {self.cfg.get('font', 'name')}; font-size: {_fmt(self.font_size)}px; fill: {self.cfg.get('colors', 'text')}; }}
        """
        dwg.defs.add(dwg.style(style_text))

        stock_group = dwg.g(id='stock')
        stock_group.add(dwg.rect(insert=(0, 0),
                                 size=(stock.width, stock.height),
                                 class_='stock'))
        dwg.add(stock_group)

        pieces_group = dwg.g(id='pieces')
        labels_group = dwg.g(id='labels')
        for i, p in enumerate(self.layout.placed):
            pieces_group.add(dwg.rect(insert=(p.x, p.y),
                                      size=(p.width, p.height),
                                      fill=self.palette[i % len(self.palette)],
                                      class_='piece'))
            labels_group.add(dwg.text(self._label_text(p),
                                      insert=self._label_position(p),
                                      class_='label'))
        dwg.add(pieces_group)
        dwg.add(labels_group)

        svg_string = dwg.tostring()

        layout = self.layout
        metadata_comment = f"""
<!-- Cut List Optimizer -->
<!-- Stock: {width} x {height} mm -->
<!-- Kerf: {_fmt(layout.kerf)} mm -->
<!-- Pieces placed: {len(layout.placed)} -->
<!-- Unplaced: {len(layout.unplaced)} -->
<!-- Waste: {layout.waste_percentage:.2f}% ({_fmt(layout.waste_area)} mm²) -->
"""

        if svg_string.startswith('<?xml'):
            xml_decl_end = svg_string.find('?>') + 2
            svg_string = svg_string[:xml_decl_end] + metadata_comment + svg_string[xml_decl_end:]
        else:
            svg_string = metadata_comment + svg_string

        return svg_string

    @staticmethod
    def _label_text(p: PlacedCut) -> str:
        return f"{_fmt(p.width)}x{_fmt(p.height)}"

    def _label_position(self, p: PlacedCut) -> Tuple[float, float]:
        return (p.x + self.font_size * 0.5, p.y + self.font_size * 1.5)


# ============================================================================
# MAIN FUNCTION
# ============================================================================

def _print_cut_plan(layout: Layout) -> None:
    for n, p in enumerate(layout.placed, start=1):
        print(f"  Cut #{n}: {_fmt(p.width)} x {_fmt(p.height)} "
              f"at ({_fmt(p.x)}, {_fmt(p.y)})")
    for cut in layout.unplaced:
        print(f"  ⚠️  Unplaced: {_fmt(cut.width)} x {_fmt(cut.height)}")


def generate_cut_sheet(csv_file: str,
                       stock_width: Optional[float] = None,
                       stock_height: Optional[float] = None,
                       kerf: Optional[float] = None,
                       output: str = "output/cutsheet.svg",
                       cfg: Optional[configparser.ConfigParser] = None
                       ) -> Optional[Layout]:
    """
    Full pipeline: parse CSV → validate → pack → emit SVG.

    Parameters
    ----------
    csv_file : str
        Path to the CSV cut list.
    stock_width, stock_height : float, optional
        Stock sheet size in mm (default: ``[sheet]`` config section).
    kerf : float, optional
        Saw blade width in mm (default: ``[sheet] kerf``).
    output : str, optional
        SVG file to write.  The directory is created automatically.
    cfg : ConfigParser, optional
        Configuration to use instead of the module-level CFG.

    Returns
    -------
    Layout, or None when the CSV contains no usable cut lines.

    Raises
    ------
    FileNotFoundError
        If *csv_file* does not exist.
    ValueError
        If the stock, kerf or cut list fail validation.
    """
    cfg = cfg if cfg is not None else CFG
    if stock_width is None:
        stock_width = cfg.getfloat('sheet', 'width')
    if stock_height is None:
        stock_height = cfg.getfloat('sheet', 'height')
    if kerf is None:
        kerf = cfg.getfloat('sheet', 'kerf')
    stock = Stock(stock_width, stock_height)

    print("=" * 70)
    print("CUT LIST OPTIMIZER")
    print("=" * 70)
    print(f"\nReading cut list from: {csv_file}")
    print(f"Stock sheet size: {_fmt(stock.width)} x {_fmt(stock.height)} mm")
    print(f"Saw blade (kerf): {_fmt(kerf)} mm")
    print()

    specs = parse_csv(csv_file)

    if not specs:
        print("\n❌ Error: No valid cuts found in CSV")
        return None

    validate_inputs(stock, kerf, specs,
                    max_pieces=cfg.getint('limits', 'max_pieces'))

    total_pieces = sum(s.quantity for s in specs)
    print(f"\n✅ Found {len(specs)} cut size(s), {total_pieces} piece(s)")

    print(f"\n{'─' * 70}")
    print("PACKING (guillotine, best fit by area)")
    print(f"{'─' * 70}")

    layout = optimize_cuts(specs, stock, kerf)
    _print_cut_plan(layout)

    print(f"\n✅ Placed {len(layout.placed)} of {total_pieces} piece(s)")
    print(f"✅ Waste: {layout.waste_percentage:.2f}% "
          f"({_fmt(layout.waste_area)} mm²)")
    message = layout.shortfall_message()
    if message:
        print(f"⚠️  Warning: {message}")

    out_dir = os.path.dirname(output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    svg_content = SVGGenerator(layout, cfg).generate()
    with open(output, 'w', encoding='utf-8') as f:
        f.write(svg_content)

    print(f"\n📄 {output}")
    print()

    return layout


# ============================================================================
# CLI INTERFACE
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Lay out a cut list on a stock sheet with guillotine cuts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cutlist.py CUTS.csv                          # sheet size from cutlist.ini
  python cutlist.py CUTS.csv 1220 2440
  python cutlist.py CUTS.csv 1220 2440 --kerf 4 -o output/panel.svg

CSV Format:
  "WIDTH(mm)";"HEIGHT(mm)";"QUANTITY"

Output SVG layers:
  stock  : the raw sheet
  pieces : placed cuts, palette colours
  labels : WxH caption per cut
        """
    )

    parser.add_argument("csv_file", help="Input CSV file path")
    parser.add_argument("width", type=float, nargs='?',
                        help="Sheet width in mm (default: from config)")
    parser.add_argument("height", type=float, nargs='?',
                        help="Sheet height in mm (default: from config)")
    parser.add_argument("-k", "--kerf", type=float, default=None,
                        help="Saw blade width in mm (default: from config)")
    parser.add_argument("-o", "--output", default="output/cutsheet.svg",
                        help="Output SVG path (default: output/cutsheet.svg)")
    parser.add_argument("-c", "--config", default=None,
                        help=f"INI configuration file (default: {CONFIG_FILENAME} "
                             f"beside this script)")

    args = parser.parse_args(argv)

    if (args.width is None) != (args.height is None):
        parser.error("give both width and height, or neither")

    try:
        cfg = load_config(args.config) if args.config else CFG
        layout = generate_cut_sheet(args.csv_file, args.width, args.height,
                                    args.kerf, args.output, cfg)
    except (OSError, ValueError, configparser.Error) as e:
        print(f"\n❌ Error: {e}")
        return 1

    return 0 if layout is not None else 1


if __name__ == "__main__":
    sys.exit(main())

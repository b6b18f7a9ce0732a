#!/usr/bin/env python3
"""
RUN_GARDEN_ROOF: Build one garden roof and export its cut list
==============================================================

This demo runs the whole pipeline for one set of parameters:
1. Build the structural model
2. Compute metrics (timber volume, surfaces)
3. Build the selected roofing layers
4. Print a summary
5. Export the member cut list for the workshop

Run with:
    python demos/run_garden_roof.py
    python demos/run_garden_roof.py --width 4.5 --length 6 --pitch 30 --roofing

Outputs:
    artifacts/garden_roof_cutlist.csv  - Member cut list for fabrication
"""

import argparse
import logging
import os
import sys

from gable_roof import (
    CONFIG,
    InputParams,
    InvalidParamsError,
    RoofingOptions,
    build_roofing,
    build_structure,
    compute_metrics,
    counter_batten_total_length,
    cut_list,
    flashing_total_surface,
    lamberia_total_length,
    roof_batten_total_length,
)


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {text}")
    print("=" * 70)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Build a gable garden roof and export its cut list',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python demos/run_garden_roof.py --width 3 --length 4 --pitch 25
  python demos/run_garden_roof.py --width 5 --length 8 --membrane --roofing --lamberia
        """
    )
    parser.add_argument('--width', type=float, default=CONFIG.default_width,
                        help=f'Outer width (m) (default: {CONFIG.default_width})')
    parser.add_argument('--length', type=float, default=CONFIG.default_length,
                        help=f'Outer length (m) (default: {CONFIG.default_length})')
    parser.add_argument('--pitch', type=float, default=CONFIG.default_pitch,
                        help=f'Roof pitch in degrees (default: {CONFIG.default_pitch})')
    parser.add_argument('--eaves', type=float, default=CONFIG.default_eaves_overhang,
                        help=f'Eaves overhang (m) (default: {CONFIG.default_eaves_overhang})')
    parser.add_argument('--gable', type=float, default=CONFIG.default_gable_overhang,
                        help=f'Gable overhang (m) (default: {CONFIG.default_gable_overhang})')
    parser.add_argument('--membrane', action='store_true', help='Include counter battens')
    parser.add_argument('--roofing', action='store_true', help='Include roof battens and flashings')
    parser.add_argument('--lamberia', action='store_true', help='Include cladding planks')
    parser.add_argument('--out', default='artifacts/garden_roof_cutlist.csv',
                        help='Cut list CSV path (default: artifacts/garden_roof_cutlist.csv)')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    params = InputParams(
        width=args.width,
        length=args.length,
        pitch=args.pitch,
        eaves_overhang=args.eaves,
        gable_overhang=args.gable,
    )

    try:
        model = build_structure(params)
    except InvalidParamsError as e:
        print(f"Invalid parameters: {e}", file=sys.stderr)
        return 2

    metrics = compute_metrics(model)
    options = RoofingOptions(membrane=args.membrane, roofing=args.roofing, lamberia=args.lamberia)
    roofing = build_roofing(model, options)

    print_header("GARDEN ROOF")
    print(f"  {params.width:.1f} x {params.length:.1f} m, {params.pitch:g} deg")
    print(f"  Pillars:       {len(model.pillars)}")
    print(f"  Tie beams:     {len(model.tie_beams)}")
    print(f"  Rafters:       {len(model.rafters)} (spacing {model.rafter_spacing * 100:.1f} cm)")
    print(f"  Ridge ties:    {len(model.ridge_ties)}")
    print(f"  Knee braces:   {len(model.knee_braces)}")
    print(f"  Ridge height:  {model.ridge_height:.2f} m")
    print(f"  Rafter length: {model.rafter_length:.3f} m")

    print_header("QUANTITIES")
    print(f"  Timber volume:  {metrics.timber_volume:.3f} m3")
    print(f"  Timber surface: {metrics.timber_surface:.2f} m2")
    print(f"  Roof surface:   {metrics.roof_surface:.2f} m2")
    print(f"  Footprint:      {metrics.total_footprint:.2f} m2")
    if options.membrane:
        print(f"  Counter battens: {counter_batten_total_length(roofing):.1f} m")
    if options.roofing:
        print(f"  Roof battens:    {roof_batten_total_length(roofing):.1f} m")
        print(f"  Flashings:       {flashing_total_surface(roofing):.2f} m2")
    if options.lamberia:
        print(f"  Lamberia:        {lamberia_total_length(roofing):.1f} m")

    cuts = cut_list(model)
    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    cuts.to_csv(args.out, index=False)

    print_header("CUT LIST")
    print(cuts.to_string(index=False))
    print(f"\nCut list exported to: {args.out}")
    return 0


if __name__ == '__main__':
    sys.exit(main())

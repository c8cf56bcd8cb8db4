"""CLI with subcommands for generating, exporting, and rendering curves."""

import argparse
import csv
import sys
import time

from sfcurves.config import DEFAULT_FPS, DEFAULT_SIZE, OUTPUT_DIR
from sfcurves.errors import CurveError
from sfcurves.geometry import check_viewport
from sfcurves.registry import CURVES, generate, get_curve, list_curves
from sfcurves.reveal import RevealState


def progress_line(done, total, elapsed):
    """Format a progress string like ``[done/total pct% elapsed_s eta eta_s]``."""
    pct = done * 100 // total if total else 0
    rate = done / elapsed if elapsed > 0 else 0
    eta = (total - done) / rate if rate > 0 else 0
    return f"[{done}/{total} {pct:>3}% {elapsed:.0f}s eta {eta:.0f}s]"


def positive_int(value):
    """argparse type for counts that must be at least 1."""
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return n


def _order(args):
    """--order, defaulting to the curve's own default."""
    info = get_curve(args.curve)
    return info.default_order if args.order is None else args.order


def _out_path(args, suffix):
    if args.output:
        return args.output
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    return OUTPUT_DIR / f"{args.curve}_{_order(args)}.{suffix}"


def cmd_list(args):
    """Show the available curves."""
    for c in list_curves():
        info = CURVES[c["id"]]
        print(f"  {c['id']:10s} {c['title']:28s} "
              f"order 0-{c['max_order']} (default {info.default_order})")
        if args.verbose:
            print(f"    {c['description']}")


def cmd_points(args):
    """Export the point sequence to CSV."""
    order = _order(args)
    check_viewport(args.size, args.size)
    points = generate(args.curve, order, args.size, args.size)
    fieldnames = ["index", "x", "y"]
    out = args.output
    if out == "-":
        writer = csv.DictWriter(sys.stdout, fieldnames=fieldnames)
        writer.writeheader()
        for i, (x, y) in enumerate(points):
            writer.writerow({"index": i, "x": f"{x:.4f}", "y": f"{y:.4f}"})
    else:
        with open(out, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for i, (x, y) in enumerate(points):
                writer.writerow({"index": i, "x": f"{x:.4f}", "y": f"{y:.4f}"})
        print(f"Exported {len(points)} points to {out}")


def cmd_render(args):
    """Render the curve (or a partial reveal of it) to PNG."""
    from sfcurves.render import render_png

    order = _order(args)
    check_viewport(args.size, args.size)
    points = generate(args.curve, order, args.size, args.size)
    out_path = _out_path(args, "png")
    render_png(points, args.size, args.size, out_path, cursor=args.cursor)
    print(f"  {out_path} ({len(points)} points)")


def cmd_animate(args):
    """Render the progressive reveal to an animated GIF."""
    from sfcurves.render import animate_gif
    from sfcurves.session import CurveSession

    check_viewport(args.size, args.size)
    session = CurveSession(args.curve, order=_order(args), size=args.size,
                           speed=args.speed)
    out_path = _out_path(args, "gif")
    t0 = time.time()
    total = len(session.points)

    def report(s):
        done = total if s.reveal.state is RevealState.COMPLETE else s.reveal.cursor
        print(f"\r  {s.reveal.status_text():18s} "
              f"{progress_line(done, total, time.time() - t0)}",
              end="", flush=True)

    frames = animate_gif(session, out_path, fps=args.fps, on_frame=report)
    print()
    print(f"  {out_path} ({frames} frames, {total} points)")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="sfcurves",
        description="Space-filling curve generator and renderer",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    curve_ids = list(CURVES)

    # list
    p_list = subparsers.add_parser("list", help="List available curves")
    p_list.add_argument("-v", "--verbose", action="store_true",
                        help="Include curve descriptions")
    p_list.set_defaults(func=cmd_list)

    def add_curve_args(p):
        p.add_argument("curve", choices=curve_ids, help="Curve to generate")
        p.add_argument("--order", type=int, default=None,
                       help="Recursion depth (default: per-curve)")
        p.add_argument("--size", type=int, default=DEFAULT_SIZE,
                       help=f"Square viewport size in px (default: {DEFAULT_SIZE})")

    # points
    p_points = subparsers.add_parser("points", help="Export points to CSV")
    add_curve_args(p_points)
    p_points.add_argument("-o", "--output", default="-",
                          help="Output file (default: stdout)")
    p_points.set_defaults(func=cmd_points)

    # render
    p_render = subparsers.add_parser("render", help="Render a PNG")
    add_curve_args(p_render)
    p_render.add_argument("--cursor", type=int, default=None,
                          help="Reveal only this many points (default: all)")
    p_render.add_argument("-o", "--output", default=None,
                          help=f"Output file (default: {OUTPUT_DIR}/<curve>_<order>.png)")
    p_render.set_defaults(func=cmd_render)

    # animate
    p_anim = subparsers.add_parser("animate", help="Render the reveal as a GIF")
    add_curve_args(p_anim)
    p_anim.add_argument("--speed", type=positive_int, default=None,
                        help="Points revealed per frame (default: per-curve)")
    p_anim.add_argument("--fps", type=positive_int, default=DEFAULT_FPS,
                        help=f"Frames per second (default: {DEFAULT_FPS})")
    p_anim.add_argument("-o", "--output", default=None,
                        help=f"Output file (default: {OUTPUT_DIR}/<curve>_<order>.gif)")
    p_anim.set_defaults(func=cmd_animate)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except CurveError as e:
        print(f"sfcurves: error: {e}", file=sys.stderr)
        sys.exit(2)

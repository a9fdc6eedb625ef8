# src/palette_styler/demo.py
import argparse
import json
import logging
import sys

from dotenv import load_dotenv


def _read_scene(path):
    """Load a JSON scene: a list of nodes, or an object with a 'nodes' list."""
    if path in (None, "-"):
        data = json.load(sys.stdin)
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    if isinstance(data, dict):
        data = data.get("nodes", [data])
    return data


def main(argv=None):
    """CLI: classify the solid colors of a scene export and optionally materialize styles."""
    from .general.utils import reload_topics
    from .taxonomy import InMemoryStyleLibrary, PaletteError, PaletteRun
    from .taxonomy.settings import get_settings

    parser = argparse.ArgumentParser(
        prog="palette-styler",
        description="Name the solid colors of a scene by hue family and tone; create styles.",
    )
    parser.add_argument("scene", nargs="?", help="JSON scene file ('-' or omitted: stdin)")
    parser.add_argument("--select", nargs="+", default=[], metavar="ID", help="Color ids to style")
    parser.add_argument("--all", action="store_true", help="Style every color of the palette")
    parser.add_argument("--relevel", action="store_true", help="Level the selection on its own")
    parser.add_argument("--no-alpha", action="store_true", help="Ignore opacity in color ids")
    parser.add_argument("--upper", action="store_true", help="Uppercase display hex")
    parser.add_argument("--debug", action="store_true", help="Verbose debug traces")

    args = parser.parse_args(argv)

    load_dotenv()
    if args.debug:
        import os

        os.environ["PALETTE_DEBUG_TOPICS"] = "all"
        reload_topics()
        logging.basicConfig(level=logging.DEBUG)

    try:
        settings = get_settings(
            track_opacity=False if args.no_alpha else None,
            hex_case="upper" if args.upper else None,
        )
        run = PaletteRun.from_scene(_read_scene(args.scene), settings=settings)
        result = {"swatches": run.swatches()}

        selection = [e.color_id for e in run.ordered] if args.all else args.select
        if selection:
            library = InMemoryStyleLibrary()
            report = run.generate_styles(selection, library, relevel=args.relevel)
            result["styles"] = library.as_records()
            result["unresolved"] = [w.color_id for w in report["warnings"]]
            print(f"🎉 {report['message']}", file=sys.stderr)
    except (PaletteError, OSError, ValueError) as e:
        print(f"🚫 {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())

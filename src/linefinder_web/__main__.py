from __future__ import annotations
import argparse
from linefinder.engine import Engine
from linefinder.errors import DocumentLoadError
from .web import app, attach


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Line finder web UI (Flask)")
    ap.add_argument("--document", required=True, help="Document to search")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=5000)
    ap.add_argument("--mode", choices=["serial", "threads", "procs"], default=None)
    ap.add_argument("--workers", type=int, default=None)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    engine = Engine()
    try:
        engine.load(args.document, mode=args.mode, workers=args.workers, verbose=args.verbose)
    except DocumentLoadError as e:
        ap.error(str(e))
    attach(engine)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

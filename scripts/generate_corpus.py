from __future__ import annotations

import argparse
from pathlib import Path

from translator.testing import generate_malformed_sources, generate_sources


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=1000)
    ap.add_argument("--malformed", action="store_true", help="Splice junk into every program")
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    args = ap.parse_args(argv)

    kind = "malformed" if args.malformed else "valid"
    out_dir = Path(args.out).resolve() / f"{kind}_seed_{args.seed}_count_{args.count}"
    out_dir.mkdir(parents=True, exist_ok=True)

    if args.malformed:
        sources = generate_malformed_sources(seed=args.seed, count=args.count)
    else:
        sources = generate_sources(seed=args.seed, count=args.count)
    for i, src in enumerate(sources):
        (out_dir / f"case_{i:06d}.txt").write_text(src, encoding="utf-8")

    print(str(out_dir))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

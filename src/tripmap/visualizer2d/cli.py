# cli.py
import argparse
import logging
import sys
import time
from pathlib import Path

from tripmap.logging_config import configure
from tripmap.model.accumulator import MODES, accumulate_file
from tripmap.model.models import TripMapError
from .config import RunConfig, load_json
from .overlay import TileOverlay
from .renderer import MapContext

log = logging.getLogger(__name__)

USAGE = "Usage: tripmap -file <filename> -mode [plot|line] -limit [0|N]"


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="tripmap", description="Plot trip origins/destinations on a static map")
    p.add_argument("-file", "--file", dest="file", help="input CSV")
    p.add_argument("-mode", "--mode", dest="mode", choices=MODES, help="plot: markers, line: markers + line")
    p.add_argument("-limit", "--limit", dest="limit", type=int, help="max data rows to examine (0 = all)")
    p.add_argument("-config", "--config", dest="config", help="JSON file with defaults")
    p.add_argument("-no-tiles", "--no-tiles", dest="overlay_map", action="store_false", default=None,
                   help="draw without the map background")
    p.add_argument("-zoom", "--zoom", dest="zoom", type=int)
    p.add_argument("-out-dir", "--out-dir", dest="out_dir")
    p.add_argument("-log-level", "--log-level", dest="log_level")
    return p.parse_args(argv)


def output_path(cfg: RunConfig, row_count: int, now: float | None = None) -> Path:
    stem = Path(cfg.file).stem
    ts = int(time.time() if now is None else now)
    return Path(cfg.out_dir) / f"img-{stem}-{cfg.mode}-{row_count}-{ts}.png"


def terminate(err: Exception | None = None) -> int:
    # ~ は展開されないので `-file=~/x` ではなく `-file ~/x` を使う
    print("\n" + USAGE)
    if err is not None:
        print(f"Error: {err}")
    return 1


def run(cfg: RunConfig) -> Path:
    overlay = TileOverlay(cfg.tiles, cfg.zoom) if cfg.overlay_map else None
    ctx = MapContext(cfg.width, cfg.height, overlay)

    result = accumulate_file(cfg.file, ctx, mode=cfg.mode, limit=cfg.limit)
    img = ctx.render()

    out = output_path(cfg, result.rows_examined)
    out.parent.mkdir(parents=True, exist_ok=True)
    ctx.save(out, img)
    return out


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        cfg_dict = load_json(args.config)
        # JSONをデフォルトに、CLIで上書き
        for k, v in vars(args).items():
            if k == "config": continue
            if v is not None: cfg_dict[k] = v
        cfg = RunConfig.from_dict(cfg_dict)
    except (TripMapError, OSError) as e:
        return terminate(e)

    configure(cfg.log_level)
    print(f"Input: {cfg.file}, mode: {cfg.mode}, limit: {cfg.limit}")

    try:
        out = run(cfg)
    except (TripMapError, OSError) as e:
        log.debug("fatal", exc_info=True)
        return terminate(e)

    print("\nGenerated: ", out)
    return 0


if __name__ == "__main__":
    sys.exit(main())

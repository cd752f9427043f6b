# main.py
import json
import sys

from nd_path.app.build import build
from nd_path.app.run import run
from nd_path.io.config import load_scenario


def main(path: str, *, use_logging: bool = True) -> int:
    app = build(load_scenario(path), use_logging=use_logging)
    outcomes = run(app)
    for o in outcomes:
        print(json.dumps(o.to_dict()))
    return 0 if all(o.ok for o in outcomes) else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1]))

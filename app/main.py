import json
import sys

from config.logger import configure_logging
from config.settings import LOG_LEVEL, require_token
from core.search import SearchPipeline


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: gh-repo-search <search expression>", file=sys.stderr)
        return 2

    configure_logging(LOG_LEVEL)
    pipeline = SearchPipeline(" ".join(args), require_token())
    records = pipeline.get_display_records()
    print(json.dumps([r.to_dict() for r in records], indent=2))
    return 0

if __name__ == "__main__":
    sys.exit(main())

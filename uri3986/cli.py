import argparse
import json
import sys
from functools import wraps

import uri3986

parser = argparse.ArgumentParser(
    prog="uri3986", description="Split URI references into RFC 3986 components"
)

parser.add_argument("uris", type=str, nargs="+", metavar="URI", help="URI reference")
parser.add_argument(
    "-j", "--json", action="store_true", help="Print one JSON object per URI"
)
parser.add_argument(
    "-V", "--version", action="version", version=f"%(prog)s {uri3986.__version__}"
)


def preview(func=None, text=""):
    @wraps(func)
    def _inner(*args, **kwargs):
        print(text.center(30, "="))
        return func(*args, **kwargs)

    if func is None:

        def _inner_decorator(fnc):
            nonlocal func
            func = fnc
            return _inner

        return _inner_decorator
    return _inner


def as_dict(parsed: uri3986.ParsedUri) -> dict:
    return {
        "scheme": parsed.scheme,
        "userinfo": parsed.userinfo,
        "host": parsed.host,
        "port": parsed.port if parsed.has_port else None,
        "path": parsed.path,
        "query": parsed.query,
        "fragment": parsed.fragment,
        "relative_reference": parsed.is_relative_reference(),
        "relative_path": parsed.contains_relative_path(),
    }


@preview(text="COMPONENTS")
def write_components(components, /):
    for key, value in components.items():
        print(f"{key}: {value!r}")


def main(argv=None) -> int:
    args = parser.parse_args(argv)
    status = 0

    for value in args.uris:
        try:
            parsed = uri3986.parse_uri(value)
        except uri3986.UriParsingError as e:
            print(f"{value}: {e.reason}", file=sys.stderr)
            status = 1
            continue

        components = as_dict(parsed)
        if args.json:
            print(json.dumps({"uri": value, **components}))
        else:
            print(value)
            write_components(components)
    return status


if __name__ == "__main__":
    sys.exit(main())

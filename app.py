"""Entry point for padschema

Loads a controller definition, prints its controls grouped by player and
optionally runs a sample through the axis constraints of one class.
"""
import argparse
import logging
import sys

from loader import DefinitionError, load_definition

LOG = logging.getLogger("padschema")


def parse_sample(text: str):
    name, sep, value = text.rpartition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError("expected NAME=VALUE, got %r" % text)
    try:
        return name, float(value)
    except ValueError:
        raise argparse.ArgumentTypeError("value for %r is not a number: %r" % (name, value)) from None


def format_control(definition, name: str) -> str:
    line = name
    rng = definition.float_range(name)
    if rng is not None:
        width = rng.max_digits() + 1  # room for the sign
        line += "  [%*d %*d %*d]" % (width, int(rng.min), width, int(rng.mid), width, int(rng.max))
    label = definition.category_label(name)
    if label:
        line += "  (%s)" % label
    return line


def describe(definition) -> str:
    lines = ["%s: %d player(s)" % (definition.name or "<unnamed>", definition.player_count)]
    for idx, group in enumerate(definition.controls_ordered()):
        if not group:
            continue
        lines.append("System" if idx == 0 else "Player %d" % idx)
        for name in group:
            lines.append("  " + format_control(definition, name))
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(description="padschema: inspect controller definitions")
    parser.add_argument("--definition", required=True, help="YAML controller definition")
    parser.add_argument("--constraint-class", help="axis constraint class to apply to --sample values")
    parser.add_argument("--sample", action="append", type=parse_sample, default=[],
                        metavar="NAME=VALUE", help="float control sample (repeatable)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default: WARNING)")
    parser.add_argument("--log-format", default="%(levelname)s:%(name)s:%(message)s",
                        help="Logging format string (default: %(levelname)s:%(name)s:%(message)s)")
    parser.add_argument("--debug-modules", nargs="*", default=[],
                        help="Modules to set to DEBUG level (e.g., 'loader', 'constraints', 'definition')")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=args.log_format)
    for module in args.debug_modules:
        logging.getLogger(f"padschema.{module}").setLevel(logging.DEBUG)

    try:
        definition = load_definition(args.definition)
    except (OSError, DefinitionError) as e:
        LOG.error("could not load definition: %s", e)
        return 1

    print(describe(definition))

    if args.sample:
        values = dict(args.sample)
        if args.constraint_class:
            definition.apply_axis_constraints(args.constraint_class, values)
        print("Sample")
        for name, value in values.items():
            print("  %s = %g" % (name, value))
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Entry point for numeric-fields."""

from numeric_fields.app import NumericFieldsApp
from numeric_fields.config import parse_args, resolve_field_defaults


def main() -> None:
    """Run the numeric-fields demo application."""
    args = parse_args()
    defaults = resolve_field_defaults(args)
    app = NumericFieldsApp(defaults=defaults)
    app.run()


if __name__ == "__main__":
    main()

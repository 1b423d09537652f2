"""Quickstart example for fixeddecoder.

This example demonstrates decoding display-formatted money into exact
minor units.

Note: Examples 1-4 work without Babel. Example 5 needs the babel extra:
    pip install fixeddecoder[babel]
"""

from fixeddecoder import FixedDecoder, decode_amount, is_valid_amount
from fixeddecoder.core import is_babel_available
from fixeddecoder.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Grouped amount
print("=" * 50)
print("Example 1: Grouped Amount")
print("=" * 50)

decoder = FixedDecoder("#,##0.00")

result, _ = decoder.decode("1,234.56")
print(result)
# Output: DecodedAmount(value=123456, scale=2)

if is_valid_amount(result):
    print(result.to_decimal())
    # Output: 1234.56

# Example 2: Scale follows the input
print("\n" + "=" * 50)
print("Example 2: Scale Follows the Input")
print("=" * 50)

for value in ("-12.5", "42", "0.005", "1 000 000.00"):
    result, _ = decode_amount(value, "#.00")
    print(f"{value!r:>16} -> {result}")
# Output:
#          '-12.5' -> DecodedAmount(value=-125, scale=1)
#             '42' -> DecodedAmount(value=42, scale=0)
#          '0.005' -> DecodedAmount(value=5, scale=3)
#   '1 000 000.00' -> DecodedAmount(value=100000000, scale=2)

# Example 3: European separators
print("\n" + "=" * 50)
print("Example 3: European Separators")
print("=" * 50)

german = FixedDecoder("#.##0,00", group_separator=".", decimal_separator=",")
result, _ = german.decode("-9.876,5")
print(result)
# Output: DecodedAmount(value=-98765, scale=1)

# Example 4: Errors are returned, not raised
print("\n" + "=" * 50)
print("Example 4: Diagnostics")
print("=" * 50)

result, errors = decoder.decode("12;50")
print(result)
# Output: None

for error in errors:
    print(error.code.name, error.context.found, error.context.input_position)
    # Output: UNEXPECTED_CHARACTER ; 2
    if error.diagnostic is not None:
        print(error.diagnostic.format_error())
        json_formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        print(json_formatter.format(error.diagnostic))

_, errors = FixedDecoder("#.#.#").decode("1.2")
print(errors[0])
# Output: The pattern '#.#.#' contained 2 numeric patterns; exactly one is allowed

# Example 5: Locale-derived separators
print("\n" + "=" * 50)
print("Example 5: Locale Separators (requires Babel)")
print("=" * 50)

if is_babel_available():
    from fixeddecoder import parse_amount

    for value, locale in (("1,234.56", "en_US"), ("1.234,56", "de_DE"), ("1 234,56", "lv_LV")):
        result, _ = parse_amount(value, locale)
        print(f"{locale}: {value!r} -> {result}")
    # Output:
    # en_US: '1,234.56' -> DecodedAmount(value=123456, scale=2)
    # de_DE: '1.234,56' -> DecodedAmount(value=123456, scale=2)
    # lv_LV: '1 234,56' -> DecodedAmount(value=123456, scale=2)
else:
    print("Babel not installed; skipping.")

"""
Demo: JSON Output

Builds a GS1-128 shipping label and a plain text code and prints their JSON
descriptions, value lists and module patterns.
"""

from datetime import date

from code128 import Code128, Format, sequence_to_json
from code128 import gs1_generator as gs1


def demo_json_output():
    """Demonstrate JSON output for a few codes."""

    print("=" * 80)
    print("  JSON OUTPUT DEMO")
    print("=" * 80)

    label = (
        gs1.gtin("06286740000249")
        + gs1.expiration(date(2028, 4, 30))
        + gs1.batch("GB2C")
        + gs1.serial_number("71490437969853")
    )

    test_cases = [
        ("GS1-128 pharma label", label),
        ("Ship-to postal code", gs1.to_postal_code("84020500")),
        ("Plain text", Code128.create_b("Kingcean")),
        ("Extended Latin-1 text", Code128.create_b("Cr\xe8me br\xfbl\xe9e")),
    ]

    for title, code in test_cases:
        print(f"\n{title}")
        print("-" * 80)
        print(f"Text:   {code}")
        print(f"Values: {code.to_string(Format.VALUES)}")
        print("\nJSON Output:")
        print(sequence_to_json(code))

    print("\n\n" + "=" * 80)
    print("  AI RECORDS")
    print("=" * 80)

    for record in label.get_ai_records():
        print(f"  {record.title or 'Unknown AI':25s}: {record.data}")

    print("\n\n" + "=" * 80)
    print("  MODULE PATTERN")
    print("=" * 80)

    pattern = label.to_barcode_string(black="#", white=" ")
    print(f"\n{pattern}")
    print(f"\nRead back: {Code128.from_pattern(label.to_barcode()) == label}")


if __name__ == "__main__":
    demo_json_output()

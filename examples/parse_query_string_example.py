"""Minimal example for parse_form_data with a query string and form pairs."""

from deepform import parse_form_data


def main() -> None:
    """Parse the same data from a query string and from form pairs."""
    query = "?name=lamp&%2Bprice=9.5&tags[]=desk&tags[]=light&%26in_stock=on&size.w=30&size.h=45"
    print("query:", parse_form_data(query))

    pairs = [
        ("name", "lamp"),
        ("+price", "9.5"),
        ("tags[]", "desk"),
        ("tags[]", "light"),
        ("&in_stock", "on"),
        ("note", ""),
    ]
    print("pairs:", parse_form_data(pairs, omit_empty_strings=True))


if __name__ == "__main__":
    main()

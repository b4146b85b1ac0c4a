"""Core parsing machinery: quoting, coercion and the parsing stages."""

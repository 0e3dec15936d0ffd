"""shortdict - Short strings for integers over arbitrary alphabets.

Converts non-negative integers to and from short strings using a
caller-supplied alphabet ("dictionary"), and rearranges dictionaries so
their leading symbols spell a phrase.

Core concepts:
    - A dictionary is an ordered sequence of symbols; its length is the base
    - Shortened strings are written least-significant digit first
    - Rearranging moves symbols to the front, falling back to substitutions

Example:
    14794393443 → "2dD)BC"  (94-symbol dictionary)
    "hello world" → dictionary starting "hel1o_w0rd..." (case + leet)

Usage:
    from shortdict.dictionary import make_dictionary
    from shortdict.converter import shorten, lengthen
    from shortdict.rearrange import rearrange, CaseFlip, LeetSubstitution

    d = make_dictionary("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789")
    short = shorten(d, 123456789)
    assert lengthen(d, short) == 123456789

    result = rearrange(d, "hello world", [CaseFlip(), LeetSubstitution()])
    print(result.dictionary)
"""

__version__ = "0.1.0"

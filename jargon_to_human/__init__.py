"""Jargon to Human.

Rule-based rewriting of crypto/web3 jargon into three variants:
- Plain-language paragraph (glossary definitions, slang rewrites, fillers removed)
- Thread-ready short post (one thought per line)
- Newbie version (plain text plus up to two beginner tips)

No language model is involved; every pass is a deterministic rewrite over
fixed in-memory tables.
"""

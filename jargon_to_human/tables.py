from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Pattern, Tuple


GLOSSARY: Mapping[str, str] = MappingProxyType(
    {
        "blockchain": "a shared public ledger that records transactions",
        "block": "a batch of transactions grouped together",
        "hash": "a unique digital fingerprint of data",
        "node": "a computer that runs the network software",
        "wallet": "an app or device that stores your crypto access keys",
        "seed phrase": "a secret list of words that recovers a wallet",
        "private key": "the secret code that controls your funds",
        "public key": "the shareable code that receives funds",
        "smart contract": "self-running code that enforces an agreement",
        "token": "a digital asset issued on a blockchain",
        "coin": "a native asset of a blockchain",
        "layer 2": "a scaling network built on top of a main chain",
        "execution layer": "the part of a chain where transactions are processed",
        "rollup": "a layer 2 that bundles transactions to save fees",
        "shared sequencer": "a coordinator that orders transactions for multiple rollups",
        "sequencer": "a service that orders and batches transactions",
        "mainnet": "the live public blockchain",
        "testnet": "a practice blockchain for testing",
        "gas": "the fee paid to process a transaction",
        "gas fee": "the fee paid to process a transaction",
        "staking": "locking tokens to help run the network",
        "validator": "a participant that confirms transactions",
        "validator set": "the group of validators running the network",
        "proof of stake": "a method where validators lock tokens to secure the chain",
        "proof of work": "a method where miners use computing power to secure the chain",
        "miner": "a participant who secures the chain with computing power",
        "airdrop": "free tokens sent to users",
        "liquidity pool": "a shared pool of tokens used for trading",
        "liquidity": "how easy it is to buy or sell without big price moves",
        "yield farming": "moving funds between pools to earn rewards",
        "dex": "a decentralized exchange with no central operator",
        "cex": "a centralized exchange run by a company",
        "bridge": "a tool that moves assets between blockchains",
        "oracle": "a service that brings real-world data on-chain",
        "rug pull": "a scam where creators abandon a project and take funds",
        "account abstraction": "smart contracts that make wallets easier to use",
        "data availability layer": "a network that stores transaction data for verification",
        "mint": "to create new tokens",
        "burn": "to permanently remove tokens",
        "faucet": "a site that gives small test tokens",
        "whale": "a holder with a very large balance",
        "dao": "a group that makes decisions using on-chain votes",
        "mev": "extra value that can be extracted by reordering transactions",
        "slippage": "the gap between expected and actual trade price",
        "market cap": "price multiplied by total supply",
        "volatility": "how fast the price moves up and down",
        "finality": "the point when a transaction cannot be reversed",
        "modular": "designed as separate parts that work together",
        "permissionless": "open to anyone without approval",
    }
)

# Longest first so "gas fee" is consumed before "gas"; ties keep table order.
GLOSSARY_SCAN_ORDER: Tuple[str, ...] = tuple(sorted(GLOSSARY, key=len, reverse=True))


def _rule(pattern: str, replace: str) -> Tuple[Pattern[str], str]:
    return re.compile(pattern, re.IGNORECASE), replace


# Applied in order; a later rule sees the output of every earlier one.
REWRITE_RULES: Tuple[Tuple[Pattern[str], str], ...] = (
    _rule(
        r"zk-native execution layer with parallelized prover architecture",
        "a blockchain designed to process many private transactions at once. "
        "It does this by running proofs in parallel instead of one-by-one.",
    ),
    _rule(r"gm\b", "good morning"),
    _rule(r"ngmi\b", "not going to make it"),
    _rule(r"wagmi\b", "we are going to make it"),
    _rule(r"dyor\b", "do your own research"),
    _rule(r"fomo\b", "fear of missing out"),
    _rule(r"fud\b", "fear, uncertainty, and doubt"),
    _rule(r"ape in\b", "buy quickly without much research"),
    _rule(r"paper hands", "selling too early"),
    _rule(r"diamond hands", "holding through volatility"),
    _rule(r"rekt", "lost a lot of money"),
    _rule(r"wen\b", "when"),
    _rule(r"airdrop hunting", "chasing free token giveaways"),
    _rule(r"blue chip", "large, established project"),
    _rule(r'"?to the moon"?', "expecting a huge price jump"),
    _rule(r"bagholder", "someone holding after a big drop"),
)

FILLER_PHRASES: Tuple[str, ...] = (
    "basically",
    "essentially",
    "actually",
    "literally",
    "kind of",
    "sort of",
    "you know",
    "just",
    "like",
)

AMBIGUOUS_TERMS: Tuple[str, ...] = (
    "modular",
    "agent",
    "ai",
    "rollup",
    "intent",
    "account abstraction",
    "restaking",
    "staking",
    "oracle",
    "bridge",
    "l2",
    "layer 2",
    "layer-2",
    "sequencer",
)

HIGHLIGHT_OPEN = "[[H]]"
HIGHLIGHT_CLOSE = "[[/H]]"

GUARDRAIL_PREFIX = "Typically, this means "
FALLBACK_MECHANISM = "It works by combining the technical parts into a system."

PLAIN_LINE_LIMIT = 90
THREAD_LINE_LIMIT = 80

# (cue pattern, tip) in priority order; at most two tips are kept.
NEWBIE_TIPS: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"(gas|fee)"), "Why it matters: small fees add up, so plan your steps."),
    (re.compile(r"(risk|rug pull|scam)"), "Safety tip: double-check sources before you act."),
    (re.compile(r"volatility|price"), "Prices can move fast, so size your risk accordingly."),
    (re.compile(r"bridge"), "Bridging can take time and extra fees, so be patient."),
)
GENERIC_TIP = "If something feels unclear, start small and learn as you go."
MAX_NEWBIE_TIPS = 2

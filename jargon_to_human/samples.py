from __future__ import annotations

from typing import Iterator, Tuple

from .pipeline import TranslateOptions, TranslationResult, translate_text


DEFAULT_INPUT = "GM! I'm thinking of staking on a L2 to avoid high gas fees. WAGMI?"

DEV_SAMPLES: Tuple[str, ...] = (
    "ZK-native execution layer with parallelized prover architecture",
    "Modular rollup with shared sequencer design",
    "High MEV environment causes slippage for retail users",
    "Account abstraction improves wallet UX",
    "Data availability layer secures off-chain execution",
    "Permissionless validator set with fast finality",
)

SAMPLE_OPTIONS = TranslateOptions(keep_terms=True, highlight=False, reading_level="simple")


def run_samples(options: TranslateOptions = SAMPLE_OPTIONS) -> Iterator[Tuple[str, TranslationResult]]:
    for sample in DEV_SAMPLES:
        yield sample, translate_text(sample, options)

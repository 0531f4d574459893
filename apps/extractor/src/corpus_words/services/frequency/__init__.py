from corpus_words.services.frequency.aggregator import FrequencyTable
from corpus_words.services.frequency.extraction_job import ExtractionResult, run_extraction_job
from corpus_words.services.frequency.pipeline import extract_word_frequencies
from corpus_words.services.frequency.word_filter import evaluate_token, normalize_word

__all__ = [
    "ExtractionResult",
    "FrequencyTable",
    "evaluate_token",
    "extract_word_frequencies",
    "normalize_word",
    "run_extraction_job",
]

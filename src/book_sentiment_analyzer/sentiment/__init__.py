"""
Sentiment Module

Tokenization, stop-word removal, lexicon matching and per-chapter
aggregation of sentiment.
"""

from .lexicon import ReferenceDataError, load_lexicon, lexicon_stats
from .stopwords import HONORIFICS, build_stop_words, load_stop_words
from .tokenizer import tokenize, tokenize_lines, remove_stop_words
from .joiner import join_sentiment
from .aggregator import (
    ChapterRatio,
    WordCount,
    count_sentiment,
    score_chapters,
    score_sections,
    word_contributions,
    count_words,
    negative_ratios,
    most_negative_chapters,
)
from .pipeline import PipelineProgress, SentimentPipeline, SentimentReport

__all__ = [
    # Reference data
    "ReferenceDataError",
    "load_lexicon",
    "lexicon_stats",
    "HONORIFICS",
    "build_stop_words",
    "load_stop_words",
    # Tokens
    "tokenize",
    "tokenize_lines",
    "remove_stop_words",
    "join_sentiment",
    # Aggregation
    "ChapterRatio",
    "WordCount",
    "count_sentiment",
    "score_chapters",
    "score_sections",
    "word_contributions",
    "count_words",
    "negative_ratios",
    "most_negative_chapters",
    # Pipeline
    "PipelineProgress",
    "SentimentPipeline",
    "SentimentReport",
]

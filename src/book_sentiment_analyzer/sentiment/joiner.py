"""Match tokens against a sentiment lexicon."""

from typing import Iterable, Iterator, Mapping

from book_sentiment_analyzer.models.line import Token
from book_sentiment_analyzer.models.sentiment import Polarity, SentimentHit


def join_sentiment(tokens: Iterable[Token], lexicon: Mapping[str, Polarity]) -> Iterator[SentimentHit]:
    """Yield a hit for each token found in the lexicon; other tokens are dropped."""
    for token in tokens:
        polarity = lexicon.get(token.word)
        if polarity is not None:
            yield SentimentHit(
                word=token.word,
                book=token.book,
                chapter=token.chapter,
                line=token.line,
                polarity=polarity,
            )

"""Quote catalogue behind the daily thought card and the saved-quotes page."""

from __future__ import annotations
import random
from typing import Iterable, Optional

from .models import Quote

QUOTES: tuple[Quote, ...] = (
    Quote("1", "The best way to predict the future is to create it.", "Peter Drucker"),
    Quote("2", "Your time is limited, so don’t waste it living someone else’s life.", "Steve Jobs"),  # noqa: E501
    Quote("3", "The mind is everything. What you think you become.", "Buddha"),
    Quote("4", "The only way to do great work is to love what you do.", "Steve Jobs"),
    Quote("5", "Believe you can and you're halfway there.", "Theodore Roosevelt"),
    Quote("6", "Strive not to be a success, but rather to be of value.", "Albert Einstein"),  # noqa: E501
    Quote("7", "The journey of a thousand miles begins with a single step.", "Lao Tzu"),
    Quote("8", "You must be the change you wish to see in the world.", "Mahatma Gandhi"),  # noqa: E501
    Quote("9", "What lies behind us and what lies before us are tiny matters compared to what lies within us.", "Ralph Waldo Emerson"),  # noqa: E501
    Quote("10", "The future belongs to those who believe in the beauty of their dreams.", "Eleanor Roosevelt"),  # noqa: E501
    Quote("11", "It is better to live your own destiny imperfectly than to live an imitation of somebody else's life with perfection.", "Bhagavad Gita"),  # noqa: E501
    Quote("12", "Perform your obligatory duty, because action is indeed better than inaction.", "Bhagavad Gita"),  # noqa: E501
    Quote("13", "The soul is neither born, nor does it ever die.", "Bhagavad Gita"),
    Quote("14", "Calmness, gentleness, silence, self-restraint, and purity: these are the disciplines of the mind.", "Bhagavad Gita"),  # noqa: E501
    Quote("15", "You have the right to work, but never to the fruit of work.", "Bhagavad Gita"),  # noqa: E501
    Quote("16", "The power of God is with you at all times; through the activities of mind, senses, breathing, and emotions; and is constantly doing all the work using you as a mere instrument.", "Bhagavad Gita"),  # noqa: E501
    Quote("17", "Happiness is a state of mind, which has nothing to do with the external world.", "Bhagavad Gita (Paraphrased)"),  # noqa: E501
    Quote("18", "Whatever happened, happened for the good. Whatever is happening, is happening for the good. Whatever will happen, will also happen for the good.", "Bhagavad Gita (Interpretation)"),  # noqa: E501
    Quote("19", "The only limit to our realization of tomorrow will be our doubts of today.", "Franklin D. Roosevelt"),  # noqa: E501
    Quote("20", "Do not dwell in the past, do not dream of the future, concentrate the mind on the present moment.", "Buddha"),  # noqa: E501
    Quote("21", "Act without expectation.", "Lao Tzu"),
    Quote("22", "The mind acts like an enemy for those who do not control it.", "Bhagavad Gita"),  # noqa: E501
    Quote("23", "Set your heart upon your work but never its reward.", "Bhagavad Gita"),
    Quote("24", "A man's own self is his friend. A man's own self is his foe.", "Bhagavad Gita"),  # noqa: E501
    Quote("25", "Through selfless service, you will always be fruitful and find the fulfillment of your desires.", "Bhagavad Gita"),  # noqa: E501
    Quote("26", "The wise see knowledge and action as one.", "Bhagavad Gita"),
    Quote("27", "One who is not disturbed by happiness and distress and is steady in both is certainly eligible for liberation.", "Bhagavad Gita"),  # noqa: E501
    Quote("28", "That one is dear to me who runs not after the pleasant or away from the painful, grieves not, lusts not, but lets things come and go as they happen.", "Bhagavad Gita"),  # noqa: E501
    Quote("29", "The meaning of Karma is in the intention. The intention behind action is what matters.", "Bhagavad Gita (Interpretation)"),  # noqa: E501
    Quote("30", "Change is the law of the universe. You can be a millionaire or a pauper in an instant.", "Bhagavad Gita (Paraphrased)"),  # noqa: E501
    Quote("31", "Fear not. What is not real, never was and never will be. What is real, always was and cannot be destroyed.", "Bhagavad Gita (Paraphrased)"),  # noqa: E501
    Quote("32", "Our greatest glory is not in never falling, but in rising every time we fall.", "Confucius"),  # noqa: E501
    Quote("33", "The purpose of our lives is to be happy.", "Dalai Lama"),
    Quote("34", "Life is what happens when you're busy making other plans.", "John Lennon"),  # noqa: E501
    Quote("35", "Get busy living or get busy dying.", "Stephen King"),
    Quote("36", "You only live once, but if you do it right, once is enough.", "Mae West"),  # noqa: E501
    Quote("37", "Many of life’s failures are people who did not realize how close they were to success when they gave up.", "Thomas A. Edison"),  # noqa: E501
    Quote("38", "If you want to live a happy life, tie it to a goal, not to people or things.", "Albert Einstein"),  # noqa: E501
    Quote("39", "Your work is going to fill a large part of your life, and the only way to be truly satisfied is to do what you believe is great work.", "Steve Jobs"),  # noqa: E501
    Quote("40", "Everything you can imagine is real.", "Pablo Picasso"),
    Quote("41", "Where there is love there is life.", "Mahatma Gandhi"),
    Quote("42", "It is never too late to be what you might have been.", "George Eliot"),
)

_BY_ID = {q.id: q for q in QUOTES}


def get_quote(quote_id: str) -> Optional[Quote]:
    return _BY_ID.get(str(quote_id))


def random_quote(rng: Optional[random.Random] = None) -> Quote:
    return (rng or random).choice(QUOTES)


def resolve_quotes(ids: Iterable[str]) -> list[Quote]:
    """Quotes for the given ids, in order; unknown ids are skipped."""
    return [q for q in (get_quote(i) for i in ids) if q is not None]

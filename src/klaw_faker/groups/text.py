"""Text capability group.

Faker answers impossible requests (zero words, zero sentences) with empty
strings. These methods narrow such results to None so callers never receive
an empty text. Lists are returned as generated.
"""

from __future__ import annotations

from typing import Literal, overload

from klaw_faker.groups._base import Group

__all__ = ['TextGroup']


class TextGroup(Group):
    def word(self) -> str | None:
        """Example: ``'Lorem'``."""
        return self._faker.word() or None

    @overload
    def words(self, nb: int = 3, as_text: Literal[False] = False) -> list[str]: ...

    @overload
    def words(self, nb: int, as_text: Literal[True]) -> str | None: ...

    @overload
    def words(self, nb: int = 3, *, as_text: Literal[True]) -> str | None: ...

    def words(self, nb: int = 3, as_text: bool = False) -> list[str] | str | None:
        """Generate a list of random words.

        Args:
            nb: How many words to return.
            as_text: If True, the words are returned as one space-separated string.

        Example: ``['Lorem', 'ipsum', 'dolor']``
        """
        words = self._faker.words(nb)
        if as_text:
            return ' '.join(words) or None
        return words

    def sentence(self, nb_words: int = 6, variable_nb_words: bool = True) -> str | None:
        """Generate a random sentence.

        Args:
            nb_words: Around how many words the sentence should contain.
            variable_nb_words: Set to False to get exactly ``nb_words``.
                Otherwise the count may vary by +/-40% with a minimum of 1.

        Example: ``'Lorem ipsum dolor sit amet.'``
        """
        return self._faker.sentence(nb_words, variable_nb_words) or None

    @overload
    def sentences(self, nb: int = 3, as_text: Literal[False] = False) -> list[str]: ...

    @overload
    def sentences(self, nb: int, as_text: Literal[True]) -> str | None: ...

    @overload
    def sentences(self, nb: int = 3, *, as_text: Literal[True]) -> str | None: ...

    def sentences(self, nb: int = 3, as_text: bool = False) -> list[str] | str | None:
        """Generate a list of sentences.

        Args:
            nb: How many sentences to return.
            as_text: If True, the sentences are returned as one space-separated string.

        Example: ``['Lorem ipsum dolor sit amet.', 'Consectetur adipisicing eli.']``
        """
        sentences = self._faker.sentences(nb)
        if as_text:
            return ' '.join(sentences) or None
        return sentences

    def paragraph(self, nb_sentences: int = 3, variable_nb_sentences: bool = True) -> str | None:
        """Generate a single paragraph.

        Args:
            nb_sentences: Around how many sentences the paragraph should contain.
            variable_nb_sentences: Set to False to get exactly ``nb_sentences``.
                Otherwise the count may vary by +/-40% with a minimum of 1.

        Example: ``'Sapiente sunt omnis. Ut pariatur ad autem ducimus et.'``
        """
        return self._faker.paragraph(nb_sentences, variable_nb_sentences) or None

    @overload
    def paragraphs(self, nb: int = 3, as_text: Literal[False] = False) -> list[str]: ...

    @overload
    def paragraphs(self, nb: int, as_text: Literal[True]) -> str | None: ...

    @overload
    def paragraphs(self, nb: int = 3, *, as_text: Literal[True]) -> str | None: ...

    def paragraphs(self, nb: int = 3, as_text: bool = False) -> list[str] | str | None:
        """Generate a list of paragraphs.

        Args:
            nb: How many paragraphs to return.
            as_text: If True, the paragraphs are returned as one string,
                separated by a blank line.
        """
        paragraphs = self._faker.paragraphs(nb)
        if as_text:
            return '\n\n'.join(paragraphs) or None
        return paragraphs

    def text(self, max_nb_chars: int = 200) -> str | None:
        """Generate a text of at most ``max_nb_chars`` characters.

        Depending on ``max_nb_chars`` the text is made of words, sentences or
        paragraphs.

        Raises:
            ValueError: If ``max_nb_chars`` is below 5 (raised by the engine).

        Example: ``'Sapiente sunt omnis. Ut pariatur ad autem ducimus et.'``
        """
        return self._faker.text(max_nb_chars) or None

"""
Accumulated letter restrictions derived from feedback.

Each letter of the alphabet is, for one game, in one of three states:
  - unknown : nothing learned yet (the letter is in neither table below)
  - absent  : the letter is not in the objective word
  - present : the letter is in the word; a PresentLetter tracks, per position,
              whether it must be HERE, must NOT be here, or is still UNKNOWN,
              plus a minimum and (once known) an exact occurrence count.

Feedback is folded in one letter at a time, left to right, on a private copy;
the copy only replaces the live state when every letter of the result was
accepted. Any contradiction raises InconsistentFeedback and leaves the
restrictions exactly as they were.

Typical use:
    r = WordRestrictions(5)
    r.apply(compute_feedback("crane", "raise"))
    [w for w in words if r.satisfies(w)]
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Set

from .errors import InconsistentFeedback, LengthMismatch
from .feedback import FeedbackResult, LetterOutcome, count_marks


class LocatedState(Enum):
    UNKNOWN = 0
    HERE = 1
    NOT_HERE = 2


_LOCATED_CHAR = {LocatedState.UNKNOWN: "?", LocatedState.HERE: "H", LocatedState.NOT_HERE: "x"}


class LetterRestriction(Enum):
    """What is known about one letter at one position."""
    HERE = "here"
    PRESENT_MAYBE_HERE = "present_maybe_here"
    PRESENT_NOT_HERE = "present_not_here"
    NOT_PRESENT = "not_present"


class PresentLetter:
    """Known facts about a letter that occurs in the objective word."""

    def __init__(self, word_length: int):
        self.required_count: Optional[int] = None
        self.min_count = 1
        self.num_here = 0
        self.num_not_here = 0
        self.located: List[LocatedState] = [LocatedState.UNKNOWN] * word_length

    def copy(self) -> "PresentLetter":
        other = PresentLetter(0)
        other.required_count = self.required_count
        other.min_count = self.min_count
        other.num_here = self.num_here
        other.num_not_here = self.num_not_here
        other.located = list(self.located)
        return other

    def state(self, index: int) -> LocatedState:
        return self.located[index]

    @property
    def max_possible_here(self) -> int:
        return len(self.located) - self.num_not_here

    def set_must_be_at(self, index: int) -> None:
        previous = self.located[index]
        if previous is LocatedState.HERE:
            return
        if previous is LocatedState.NOT_HERE:
            raise InconsistentFeedback(f"position {index} was already excluded")
        self.located[index] = LocatedState.HERE
        self.num_here += 1
        if self.num_here > self.min_count:
            self.min_count = self.num_here

        if self.required_count is not None:
            if self.num_here > self.required_count:
                raise InconsistentFeedback(
                    f"{self.num_here} confirmed positions exceed the known count {self.required_count}")
            if self.num_here == self.required_count:
                # Count met: the letter is nowhere else.
                self._set_unknowns_to(LocatedState.NOT_HERE)
            elif self.max_possible_here == self.required_count:
                self._set_unknowns_to(LocatedState.HERE)
        elif self.num_here + self.num_not_here == len(self.located):
            # Every position resolved, so the count is now known.
            self.required_count = self.num_here

    def set_must_not_be_at(self, index: int) -> None:
        previous = self.located[index]
        if previous is LocatedState.NOT_HERE:
            return
        if previous is LocatedState.HERE:
            raise InconsistentFeedback(f"position {index} was already confirmed")
        self.located[index] = LocatedState.NOT_HERE
        self.num_not_here += 1

        max_possible = self.max_possible_here
        if max_possible < self.min_count:
            raise InconsistentFeedback(
                f"only {max_possible} positions left for at least {self.min_count} occurrences")
        if max_possible == self.min_count:
            # Every remaining position must hold the letter. With one position
            # left and none confirmed, this pins a single occurrence there.
            self.required_count = self.min_count
            if self.num_here < self.min_count:
                self._set_unknowns_to(LocatedState.HERE)

    def set_required_count(self, count: int) -> None:
        if self.required_count is not None:
            if self.required_count != count:
                raise InconsistentFeedback(
                    f"letter count changed from {self.required_count} to {count}")
            return
        if self.min_count > count:
            raise InconsistentFeedback(f"letter seen at least {self.min_count} times, not {count}")
        if self.max_possible_here < count:
            raise InconsistentFeedback(f"no room for {count} occurrences")
        self.min_count = count
        self.required_count = count
        if self.num_here == count:
            self._set_unknowns_to(LocatedState.NOT_HERE)
        elif self.max_possible_here == count:
            self._set_unknowns_to(LocatedState.HERE)

    def bump_min_count(self, count: int) -> None:
        """Raise the minimum count to `count` (no-op if already at least that)."""
        if self.min_count >= count:
            return
        if self.required_count is not None:
            raise InconsistentFeedback(
                f"letter seen {count} times but the count is {self.required_count}")
        if self.max_possible_here < count:
            raise InconsistentFeedback(f"no room for {count} occurrences")
        self.min_count = count
        if self.max_possible_here == count:
            self.required_count = count
            if self.num_here < count:
                self._set_unknowns_to(LocatedState.HERE)

    def merge(self, other: "PresentLetter") -> None:
        if other.required_count is not None:
            self.set_required_count(other.required_count)
        else:
            self.bump_min_count(other.min_count)
        for index, state in enumerate(other.located):
            if state is LocatedState.HERE:
                self.set_must_be_at(index)
            elif state is LocatedState.NOT_HERE:
                self.set_must_not_be_at(index)

    def _set_unknowns_to(self, new_state: LocatedState) -> None:
        for i, state in enumerate(self.located):
            if state is LocatedState.UNKNOWN:
                self.located[i] = new_state
                if new_state is LocatedState.HERE:
                    self.num_here += 1
                else:
                    self.num_not_here += 1


class WordRestrictions:
    """The restrictions a word must meet to still be a candidate."""

    def __init__(self, word_length: int):
        self.word_length = word_length
        self._present: Dict[str, PresentLetter] = {}
        self._absent: Set[str] = set()

    @classmethod
    def from_result(cls, result: FeedbackResult) -> "WordRestrictions":
        restrictions = cls(len(result.guess))
        restrictions.apply(result)
        return restrictions

    def copy(self) -> "WordRestrictions":
        other = WordRestrictions(self.word_length)
        other._present = {letter: p.copy() for letter, p in self._present.items()}
        other._absent = set(self._absent)
        return other

    # ---- mutation (all-or-nothing) ----

    def apply(self, result: FeedbackResult) -> None:
        """
        Fold one guess's feedback into these restrictions.

        Raises InconsistentFeedback (restrictions unchanged) if the result
        contradicts anything already known, and LengthMismatch if the guess has
        the wrong length.
        """
        if len(result.guess) != self.word_length:
            raise LengthMismatch(self.word_length, len(result.guess), result.guess)
        work = self.copy()
        for index, (letter, outcome) in enumerate(zip(result.guess, result.outcomes)):
            if outcome is LetterOutcome.CORRECT:
                work._set_letter_here(letter, index, result)
            elif outcome is LetterOutcome.PRESENT_ELSEWHERE:
                work._set_letter_present_not_here(letter, index, result)
            else:
                work._set_letter_not_present(letter, index, result)
        self._commit(work)

    update = apply

    def merge(self, other: "WordRestrictions") -> None:
        """Add everything known by `other`. All-or-nothing, like apply()."""
        if other.word_length != self.word_length:
            raise LengthMismatch(self.word_length, other.word_length)
        work = self.copy()
        for letter in other._absent:
            if letter in work._present:
                raise InconsistentFeedback(f"{letter!r} is both present and absent")
            work._absent.add(letter)
        for letter, presence in other._present.items():
            work._presence_for(letter).merge(presence)
        for letter, presence in list(work._present.items()):
            for index, state in enumerate(presence.located):
                if state is LocatedState.HERE:
                    work._exclude_others_at(letter, index)
        self._commit(work)

    def _commit(self, work: "WordRestrictions") -> None:
        self._present = work._present
        self._absent = work._absent

    def _presence_for(self, letter: str) -> PresentLetter:
        if letter in self._absent:
            raise InconsistentFeedback(f"{letter!r} was already known to be absent")
        presence = self._present.get(letter)
        if presence is None:
            presence = PresentLetter(self.word_length)
            # Positions owned by other letters are already ruled out.
            for other in self._present.values():
                for index, state in enumerate(other.located):
                    if state is LocatedState.HERE:
                        presence.set_must_not_be_at(index)
            self._present[letter] = presence
        return presence

    def _apply_guess_counts(self, letter: str, presence: PresentLetter,
                            result: FeedbackResult) -> None:
        num_present, num_absent = count_marks(result, letter)
        if num_absent > 0:
            # An absent mark next to present ones caps the count at the present marks.
            presence.set_required_count(num_present)
            for index, (ch, outcome) in enumerate(zip(result.guess, result.outcomes)):
                if ch == letter and outcome is LetterOutcome.ABSENT:
                    presence.set_must_not_be_at(index)
        else:
            presence.bump_min_count(num_present)

    def _exclude_others_at(self, letter: str, index: int) -> None:
        for other_letter, other in self._present.items():
            if other_letter != letter:
                other.set_must_not_be_at(index)

    def _set_letter_here(self, letter: str, index: int, result: FeedbackResult) -> None:
        presence = self._presence_for(letter)
        presence.set_must_be_at(index)
        self._apply_guess_counts(letter, presence, result)
        self._exclude_others_at(letter, index)

    def _set_letter_present_not_here(self, letter: str, index: int,
                                     result: FeedbackResult) -> None:
        presence = self._presence_for(letter)
        presence.set_must_not_be_at(index)
        self._apply_guess_counts(letter, presence, result)

    def _set_letter_not_present(self, letter: str, index: int, result: FeedbackResult) -> None:
        num_present, _ = count_marks(result, letter)
        presence = self._present.get(letter)
        if presence is not None:
            if presence.state(index) is LocatedState.HERE:
                raise InconsistentFeedback(f"{letter!r} is known to be at position {index}")
            presence.set_required_count(num_present)
            presence.set_must_not_be_at(index)
        elif num_present == 0:
            self._absent.add(letter)
        # else: a later CORRECT/PRESENT mark in this guess handles the letter.

    # ---- queries ----

    def satisfies(self, word: str) -> bool:
        """True iff `word` is consistent with everything learned so far."""
        if len(word) != self.word_length:
            return False
        if any(ch in self._absent for ch in word):
            return False
        for letter, presence in self._present.items():
            count = 0
            for index, ch in enumerate(word):
                state = presence.located[index]
                if ch == letter:
                    count += 1
                    if state is LocatedState.NOT_HERE:
                        return False
                elif state is LocatedState.HERE:
                    return False
            if presence.required_count is not None:
                if count != presence.required_count:
                    return False
            elif count < presence.min_count:
                return False
        return True

    is_satisfied_by = satisfies

    def state(self, letter: str, index: int) -> Optional[LetterRestriction]:
        """None when nothing is known about `letter`."""
        presence = self._present.get(letter)
        if presence is not None:
            located = presence.state(index)
            if located is LocatedState.HERE:
                return LetterRestriction.HERE
            if located is LocatedState.NOT_HERE:
                return LetterRestriction.PRESENT_NOT_HERE
            return LetterRestriction.PRESENT_MAYBE_HERE
        if letter in self._absent:
            return LetterRestriction.NOT_PRESENT
        return None

    def is_state_known(self, letter: str, index: int) -> bool:
        presence = self._present.get(letter)
        if presence is not None:
            return presence.state(index) is not LocatedState.UNKNOWN
        return letter in self._absent

    def required_count(self, letter: str) -> Optional[int]:
        """Exact number of occurrences of `letter`, if known (0 for absent letters)."""
        if letter in self._absent:
            return 0
        presence = self._present.get(letter)
        return presence.required_count if presence is not None else None

    def __eq__(self, other) -> bool:
        if not isinstance(other, WordRestrictions):
            return NotImplemented
        return (
            self.word_length == other.word_length
            and self._absent == other._absent
            and self._present.keys() == other._present.keys()
            and all(
                vars(p) == vars(other._present[letter])
                for letter, p in self._present.items()
            )
        )

    def __repr__(self) -> str:
        # Per present letter: H = here, x = not here, ? = unknown.
        present = ", ".join(
            letter + ":" + "".join(_LOCATED_CHAR[s] for s in p.located)
            for letter, p in sorted(self._present.items())
        )
        return (f"WordRestrictions(length={self.word_length}, present=[{present}], "
                f"absent={''.join(sorted(self._absent))!r})")

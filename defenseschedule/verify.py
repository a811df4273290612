"""
Student file verification.

Students hand in their documents as PDF files named

    <Surname>-<kind>.pdf            Иванов-отчёт.pdf
    <Surname>.<Name>-<kind>.pdf     Ivanov.Ivan-presentation.pdf

in Cyrillic or transliterated Latin. This module matches the files of a folder
to the student works of a day and sets the has_* flags of each work.
"""

from __future__ import annotations

import unicodedata
from pathlib import Path, PurePath
from typing import Dict, Iterable, List

from defenseschedule.model import DaySchedule, StudentWork


# file kind -> StudentWork flag
FILE_KINDS: Dict[str, str] = {
    "отчёт": "has_report",
    "report": "has_report",
    "презентация": "has_presentation",
    "presentation": "has_presentation",
    "отзыв": "has_supervisor_review",
    "advisor-review": "has_supervisor_review",
    "отзыв-консультанта": "has_consultant_review",
    "consultant-review": "has_consultant_review",
    "рецензия": "has_reviewer_review",
    "reviewer-review": "has_reviewer_review",
}

TRANSLITERATION: Dict[str, str] = {
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "D", "Е": "E", "Ё": "Yo",
    "Ж": "Zh", "З": "Z", "И": "I", "Й": "I", "К": "K", "Л": "L", "М": "M",
    "Н": "N", "О": "O", "П": "P", "Р": "R", "С": "S", "Т": "T", "У": "U",
    "Ф": "F", "Х": "Kh", "Ц": "Ts", "Ч": "Ch", "Ш": "Sh", "Щ": "Shch",
    "Ъ": "", "Ы": "Y", "Ь": "", "Э": "E", "Ю": "Yu", "Я": "Ya",
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "yo",
    "ж": "zh", "з": "z", "и": "i", "й": "i", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "kh", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "shch",
    "ъ": "", "ы": "y", "ь": "", "э": "e", "ю": "yu", "я": "ya",
}


def transliterate(text: str) -> str:
    return "".join(TRANSLITERATION.get(ch, ch) for ch in text)


def _file_name(path: str | PurePath) -> str:
    # macOS and cloud disks may store "ё" decomposed
    return unicodedata.normalize("NFC", PurePath(path).name)


def _name_prefixes(work: StudentWork) -> List[str]:
    parts = work.student_name.split()
    surname = parts[0]
    prefixes = [f"{surname}-"]
    if len(parts) > 1:
        prefixes.append(f"{surname}.{parts[1]}-")
    return prefixes + [transliterate(p) for p in prefixes]


class StudentFileVerifier:
    """
    Checks the files handed in by the students of one day.

    A work whose consultant is None (nobody found in the themes sheet) needs
    no consultant review. A consultant of "" means the student is listed with
    a blank consultant cell, and the review is still required.
    """

    def __init__(self, day: DaySchedule) -> None:
        self.day = day

    @staticmethod
    def student_files(work: StudentWork, paths: Iterable[str | PurePath]) -> List[str | PurePath]:
        """
        Select the files whose names start with the student's name.
        """
        prefixes = tuple(_name_prefixes(work))
        return [p for p in paths if _file_name(p).startswith(prefixes)]

    @staticmethod
    def verify_student_file(work: StudentWork, path: str | PurePath) -> bool:
        """
        Set the flag matching the file kind. Returns False for unknown files.
        """
        name = _file_name(path)
        if not name.endswith(".pdf"):
            return False

        index = name.find("-")
        if index == -1:
            return False

        kind = name[index + 1:-len(".pdf")]
        flag = FILE_KINDS.get(kind)
        if flag is None:
            return False

        setattr(work, flag, True)
        return True

    def _check(self, paths: List[str | PurePath]) -> List[str | PurePath]:
        correct: List[str | PurePath] = []
        for work in self.day.student_works():
            for path in self.student_files(work, paths):
                if self.verify_student_file(work, path):
                    correct.append(path)

            # None: no consultant found -> no consultant review expected.
            # "" (listed with a blank consultant cell) still needs the review.
            if work.consultant is None:
                work.has_consultant_review = True
        return correct

    def verify_files(self, folder: str | Path) -> List[Path]:
        """
        Verify the files of a local folder and return the recognised ones.
        """
        paths: List[str | PurePath] = sorted(p for p in Path(folder).iterdir() if p.is_file())
        return [Path(p) for p in self._check(paths)]

    def works_with_missing_files(self, paths: Iterable[str | PurePath]) -> List[StudentWork]:
        """
        Verify a list of file paths (e.g. a remote folder listing) and return
        the works that still lack at least one document.
        """
        self._check(list(paths))
        return [work for work in self.day.student_works() if not work.has_all_files()]

"""
Unit tests for student file verification.

File naming contract:
- "<Surname>-<kind>.pdf" or "<Surname>.<Name>-<kind>.pdf"
- Cyrillic or transliterated names
- only known kinds in PDF format count
"""

import tempfile
import unicodedata
import unittest
from pathlib import Path

from defenseschedule.model import CommissionMeeting, DaySchedule, StudentWork
from defenseschedule.verify import StudentFileVerifier, transliterate


def _day():
    ivanov = StudentWork(1, "Иванов Иван Иванович", "Тема", "Научрук", "Рецензент", consultant="Консультант")
    petrova = StudentWork(2, "Петрова Анна", "Тема", "Научрук", "Рецензент")
    meeting = CommissionMeeting("11:00", "ИАС, бакалавры техпрога, ГЭК 1", [ivanov, petrova])
    return DaySchedule("26 мая", [], [meeting])


class TestTransliterate(unittest.TestCase):
    def test_names(self) -> None:
        self.assertEqual(transliterate("Щукин"), "Shchukin")
        self.assertEqual(transliterate("Артём-отчёт"), "Artyom-otchyot")
        self.assertEqual(transliterate("Ivanov"), "Ivanov")


class TestStudentFileVerifier(unittest.TestCase):
    def test_student_files_by_prefix(self) -> None:
        work = _day().student_works()[0]
        paths = [
            "Иванов-отчёт.pdf",
            "Иванов.Иван-презентация.pdf",
            "Ivanov-report.pdf",
            "Ivanov.Ivan-presentation.pdf",
            "Иванова-отчёт.pdf",
            "Петрова-отчёт.pdf",
        ]
        self.assertEqual(StudentFileVerifier.student_files(work, paths), paths[:4])

    def test_verify_student_file_kinds(self) -> None:
        work = StudentWork(1, "Иванов Иван", "", "", "")
        self.assertTrue(StudentFileVerifier.verify_student_file(work, "Иванов-отзыв-консультанта.pdf"))
        self.assertTrue(work.has_consultant_review)
        self.assertFalse(work.has_supervisor_review)

        self.assertTrue(StudentFileVerifier.verify_student_file(work, "dir/Ivanov.Ivan-reviewer-review.pdf"))
        self.assertTrue(work.has_reviewer_review)

        self.assertFalse(StudentFileVerifier.verify_student_file(work, "Иванов-отчёт.docx"))
        self.assertFalse(StudentFileVerifier.verify_student_file(work, "Иванов-черновик.pdf"))
        self.assertFalse(StudentFileVerifier.verify_student_file(work, "Иванов.pdf"))
        self.assertFalse(work.has_report)

    def test_decomposed_yo(self) -> None:
        work = StudentWork(1, "Иванов Иван", "", "", "")
        name = unicodedata.normalize("NFD", "Иванов-отчёт.pdf")
        self.assertTrue(StudentFileVerifier.verify_student_file(work, name))
        self.assertTrue(work.has_report)

    def test_verify_files_in_folder(self) -> None:
        day = _day()
        with tempfile.TemporaryDirectory() as d:
            folder = Path(d)
            for name in ["Иванов-отчёт.pdf", "Ivanov-presentation.pdf", "Иванов-заметки.pdf", "readme.txt"]:
                (folder / name).write_bytes(b"")
            (folder / "Петрова-отчёт.pdf").mkdir()

            correct = StudentFileVerifier(day).verify_files(folder)

        self.assertEqual(sorted(p.name for p in correct), ["Ivanov-presentation.pdf", "Иванов-отчёт.pdf"])
        ivanov, petrova = day.student_works()
        self.assertTrue(ivanov.has_report and ivanov.has_presentation)
        self.assertFalse(ivanov.has_consultant_review)
        self.assertFalse(petrova.has_report)
        # no consultant -> nothing to hand in
        self.assertTrue(petrova.has_consultant_review)

    def test_blank_consultant_still_needs_review(self) -> None:
        day = _day()
        petrova = day.student_works()[1]
        petrova.consultant = ""
        files = ["Петрова-отчёт.pdf", "Петрова-презентация.pdf", "Петрова-отзыв.pdf", "Петрова-рецензия.pdf"]

        missing = StudentFileVerifier(day).works_with_missing_files(files)

        self.assertIn(petrova, missing)
        self.assertFalse(petrova.has_consultant_review)

    def test_works_with_missing_files(self) -> None:
        day = _day()
        files = [
            "Петрова-отчёт.pdf",
            "Петрова-презентация.pdf",
            "Петрова-отзыв.pdf",
            "Petrova-reviewer-review.pdf",
            "Иванов-отчёт.pdf",
        ]
        missing = StudentFileVerifier(day).works_with_missing_files(files)
        self.assertEqual([w.student_name for w in missing], ["Иванов Иван Иванович"])


if __name__ == "__main__":
    unittest.main()

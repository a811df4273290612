"""
Sample schedule and themes workbooks shared by the tests.

The layout mirrors a real state exam schedule: a title row, then one block per
commission meeting separated by blank rows.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Dict, List, Sequence

from openpyxl import Workbook


BLANK: tuple = ()

DATE_26 = (None, "26 мая (вторник)", None, None, None, None, "Председатель: Лисс Александр Рудольфович", None)
DATE_29 = (None, "29 мая (пятница)", None, None, None, None, "Председатель: Лисс Александр Рудольфович", None)

SCHEDULE_ROWS: List[Sequence[Any]] = [
    ("Расписание защит ВКР",),
    BLANK,
    # 26 May, first meeting
    DATE_26,
    (None, " 11:00, ауд. 3381 ", "ИАС, бакалавры техпрога, ГЭК 5006-02", None, None, None,
     "Секретарь: Хохулина Виктория Александровна", None),
    (1, "Власов Илья Максимович", "Платформа для анализа языков программирования",
     "Михайлова Елена Георгиевна", "Мазур Юрий Александрович", None, "Луцив Дмитрий Вадимович", None),
    (2, " Говорова Диана Игоревна ", "Анализ двигательной активности",
     "Графеева Наталья Генриховна", "Егорова Ольга Борисовна", None, "Назаренко Артём Александрович", None),
    (3, None, None, None, None, None, "Чижова Ангелина Сергеевна", None),
    BLANK,
    # 26 May, second meeting: roster must not be taken from here
    (None, "26 мая (вторник)", None, None, None, None, "Председатель: Другой Председатель", None),
    (None, "16:00, ауд. 3381", "ИАС, бакалавры техпрога, ГЭК 5006-03", None, None, None, None, None),
    (1, "Панарин Павел Михайлович", "Кластеризация случаев медицинского обслуживания",
     "Сысоев Сергей Сергеевич", "Велюхов Юрий Геннадьевич", None, None, None),
    BLANK,
    # not a defense meeting
    (None, "27 мая", None, None, None, None, "Председатель: Кто-то", None),
    (None, "12:00, ауд. 1", "Заседание кафедры", None, None, None, None, None),
    ("n/a", "Кто-то Ещё", "-", "-", "-", None, None, None),
    BLANK,
    BLANK,
    # 29 May, composite chair
    DATE_29,
    (None, "10:00, ауд. 3381", "Информатика/ПА, бакалавры техпрога, ГЭК 5006-04", None, None, None,
     "Секретарь: Хохулина Виктория Александровна", None),
    ("—", None, None, None, None, None, None, None),
    (1, "Бабич Никита Викторович", "Логистический портал", "Абрамов Максим Викторович",
     "Захаров Валерий Вячеславович", None, "Ковалев Владимир Сергеевич", None),
    (2, "Вяткин Артём Андреевич", "Алгебраические байесовские сети", "Абрамов Максим Викторович",
     "Фильченков Андрей Александрович", None, "Пащенко Антон Евгеньевич", None),
]

THEMES_HEADER = ("ФИО", "Тема", "Руководитель", "Рецензент", "Консультант")

THEMES_SHEETS: Dict[str, List[Sequence[Any]]] = {
    "ИАС": [
        THEMES_HEADER,
        ("Власов Илья Максимович", "...", "...", "...", " Спирин Егор Сергеевич "),
        ("Говорова Диана Игоревна", "...", "...", "...", None),
    ],
    "Информатики": [
        THEMES_HEADER,
        ("Бабич Никита Викторович", "...", "...", "...", "Корепанова Анастасия Андреевна"),
    ],
    "ПА": [
        THEMES_HEADER,
        ("Вяткин Артём Андреевич", "...", "...", "...", "Харитонов Никита Алексеевич"),
    ],
}


def build_workbook(sheets: Dict[str, List[Sequence[Any]]]) -> Workbook:
    wb = Workbook()
    wb.remove(wb.active)
    for title, rows in sheets.items():
        ws = wb.create_sheet(title)
        for row in rows:
            ws.append(list(row))
    return wb


def save_workbook(sheets: Dict[str, List[Sequence[Any]]], path: Path) -> Path:
    build_workbook(sheets).save(path)
    return path


def workbook_bytes(sheets: Dict[str, List[Sequence[Any]]]) -> bytes:
    buf = io.BytesIO()
    build_workbook(sheets).save(buf)
    return buf.getvalue()

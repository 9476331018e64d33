#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
数字命理生成器

- 生命灵数：出生日期所有数字相加后逐位约减到个位，11/22/33 保留
- 表现数字：姓名字母按毕达哥拉斯表取值；汉字按字符编码取 1-9
"""

from typing import Dict

from divination.core.calendar_facts import CalendarFacts
from divination.core.seeded_sequence import SeededSequence
from divination.data.symbol_tables import LETTER_VALUES, MASTER_NUMBERS, NUMBER_MEANINGS
from divination.generators.base import ContentGenerator, render_sections


def reduce_number(n: int) -> int:
    while n > 9 and n not in MASTER_NUMBERS:
        n = sum(int(d) for d in str(n))
    return n


def life_path_number(birth_date: str) -> int:
    facts = CalendarFacts.from_date(birth_date)
    digits = f"{facts.year:04d}{facts.month:02d}{facts.day:02d}"
    return reduce_number(sum(int(d) for d in digits))


def name_number(full_name: str) -> int:
    total = 0
    for ch in full_name.lower():
        if ch in LETTER_VALUES:
            total += LETTER_VALUES[ch]
        elif "一" <= ch <= "龥":
            total += ord(ch) % 9 + 1
    return reduce_number(total) if total else 0


class NumerologyGenerator(ContentGenerator):
    """数字命理"""

    method_id = "numerology"
    STATIC_SECTIONS = [
        ("生命灵数", "生命灵数反映一个人与生俱来的天赋与人生课题。"),
        ("数字能量解读", "您的数字能量均衡，兼具行动力与思考力。"),
        ("建议", "1. 发挥天赋优势\n2. 正视人生课题\n3. 保持学习与成长"),
    ]

    def _render(self, seq: SeededSequence, inputs: Dict[str, str]) -> str:
        path = life_path_number(inputs.get("birthDate", ""))
        path_key, path_text = NUMBER_MEANINGS[path]

        name = inputs.get("fullName", "").strip()
        expression = name_number(name) if name else 0
        if expression:
            expr_key, expr_text = NUMBER_MEANINGS[expression]
            expression_section = f"{name}的表现数字为{expression}（{expr_key}）：{expr_text}"
        else:
            expr_key = ""
            expression_section = "未提供姓名，表现数字暂不计算。"

        if expression and expression == path:
            harmony = "生命灵数与表现数字一致，内在天赋与外在表现高度统一，做事容易得心应手。"
        elif expression:
            harmony = f"生命灵数的「{path_key}」与表现数字的「{expr_key}」相互补充，两种能量需要在生活中找到平衡。"
        else:
            harmony = f"您的核心能量是「{path_key}」，围绕这一主题规划人生方向会更加顺畅。"

        personal_year = reduce_number(path + seq.randint(1, 9))
        year_key, _ = NUMBER_MEANINGS[personal_year]

        return render_sections([
            ("生命灵数", f"您的生命灵数为{path}（{path_key}）：{path_text}"),
            ("表现数字", expression_section),
            ("数字能量解读", harmony),
            ("流年数字", f"今年的流年数字为{personal_year}，主题是「{year_key}」，宜顺应这一能量安排计划。"),
            ("建议", f"1. 发挥「{path_key}」的天赋优势\n2. 在「{year_key}」的主题上多下功夫\n3. 保持耐心，循序渐进"),
        ])

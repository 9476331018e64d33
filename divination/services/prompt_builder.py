#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
提示词模板

每个方法一份模板：开场说明、输入字段、分析要求；
末尾统一附加【标题】输出格式约定，以便分段解析器识别。
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

FORMAT_TITLES = [
    ("总论", "总体运势分析"),
    ("事业", "事业运势分析"),
    ("财运", "财运分析"),
    ("感情", "感情运势分析"),
    ("健康", "健康状况分析"),
    ("建议", "改善建议"),
]

ASTROLOGY_CHART_REQUIREMENT = """
请提供详细的星盘分析，必须包含星盘图的详细文字描述，以便还原星盘图。描述中需要包括：
1. 各行星的位置，请使用以下格式描述行星位置：
   太阳位于白羊座15度
   月亮位于金牛座10度
   (其他行星同理，必须包含：太阳、月亮、水星、金星、火星、木星、土星、天王星、海王星、冥王星、上升点、中天点)
2. 行星之间的相位关系，请使用以下格式：
   太阳和月亮形成六分相(60度)
   水星和金星形成合相(0度)
3. 上升星座和中天星座

之后再提供太阳、月亮、上升星座解读，行星相位分析，以及对性格特质、事业发展、人际关系等方面的解读。"""


@dataclass(frozen=True)
class PromptTemplate:
    """提示词模板"""
    intro: str
    fields: List[Tuple[str, str]] = field(default_factory=list)  # (显示名, 输入ID)
    requirement: str = ""
    leading_titles: List[Tuple[str, str]] = field(default_factory=list)


PROMPT_TEMPLATES: Dict[str, PromptTemplate] = {
    "bazi": PromptTemplate(
        intro="根据以下信息进行八字命理分析：",
        fields=[("出生日期", "birthDate"), ("出生时间", "birthTime"), ("性别", "gender")],
        requirement="请提供详细的八字命理分析，包括命主的五行属性、日主强弱、大运走向、事业财运、婚姻情感等方面的解读。",
    ),
    "ziwei": PromptTemplate(
        intro="根据以下信息进行紫微斗数分析：",
        fields=[("出生日期", "birthDate"), ("出生时辰", "birthTime"), ("性别", "gender")],
        requirement="请提供详细的紫微斗数星盘分析，包括十二宫位解读、主星分析、流年运势等内容。",
    ),
    "zhouyi": PromptTemplate(
        intro="请对以下问题进行周易预测：",
        fields=[("预测问题", "question")],
        requirement="请随机生成一个六十四卦之一，并提供详细的卦象分析，包括卦辞、爻辞解读和针对问题的预测结果。",
        leading_titles=[("卦象", "所得卦名与卦象"), ("卦辞", "卦辞原文与释义"), ("爻辞解读", "变爻与爻辞解读")],
    ),
    "qimen": PromptTemplate(
        intro="请对以下问题进行奇门遁甲预测：",
        fields=[("所问之事", "question")],
        requirement="请排出奇门盘局，说明值符、值使与用神，并给出吉凶判断和行动建议。",
    ),
    "tarot": PromptTemplate(
        intro="请进行塔罗牌预测：",
        fields=[("咨询问题", "question"), ("牌阵", "spread")],
        requirement="请随机抽取适合该牌阵的塔罗牌，并提供详细的牌面解读、牌位含义以及对问题的预测和建议。",
        leading_titles=[("塔罗牌阵", "牌阵与抽到的牌"), ("牌面解读", "逐张牌的牌位含义")],
    ),
    "astrology": PromptTemplate(
        intro="请根据以下信息进行占星分析：",
        fields=[("出生日期", "birthDate"), ("出生时间", "birthTime"), ("出生地点", "birthPlace")],
        requirement=ASTROLOGY_CHART_REQUIREMENT.strip(),
        leading_titles=[("星盘描述", "详细的星盘结构描述")],
    ),
    "numerology": PromptTemplate(
        intro="请根据以下信息进行数字命理学分析：",
        fields=[("全名", "fullName"), ("出生日期", "birthDate")],
        requirement="请计算命运数字、灵魂数字、表现数字等关键数字，并提供详细的数字能量解读，包括性格特质、生命使命、潜在挑战等方面的分析。",
    ),
    "dream": PromptTemplate(
        intro="请对以下梦境进行解析：",
        fields=[("梦境内容", "dreamContent")],
        requirement="请结合传统解梦与心理学，解析梦中主要意象的寓意与预示，并给出建议。",
    ),
    "almanac": PromptTemplate(
        intro="请根据以下日期提供老黄历信息：",
        fields=[("查询日期", "date")],
        requirement="请给出当日宜忌、吉凶方位、时辰吉凶、冲煞、胎神等信息，并做简要总结。",
    ),
}


def render_prompt(method_name: str, inputs: Dict[str, str], template: Optional[PromptTemplate] = None) -> str:
    """
    按模板构建提示词

    Args:
        method_name: 方法名称
        inputs: 用户输入
        template: 方法模板，为空时列出全部输入

    Returns:
        提示词文本
    """
    lines = [f"请作为一个专业的{method_name}分析师，"]
    if template:
        lines[0] += template.intro
        for label, key in template.fields:
            lines.append(f"{label}：{inputs.get(key, '')}")
        if template.requirement:
            lines.append("")
            lines.append(template.requirement)
        leading = template.leading_titles
    else:
        lines[0] += "请根据以下信息进行命理分析："
        for key, value in inputs.items():
            lines.append(f"{key}：{value}")
        leading = []

    lines.append("")
    lines.append("请按照以下格式返回结果，以便应用程序解析：")
    for title, hint in list(leading) + FORMAT_TITLES:
        lines.append(f"【{title}】")
        lines.append(hint)
    return "\n".join(lines) + "\n"


def build_prompt(method_id: str, method_name: str, inputs: Dict[str, str]) -> str:
    return render_prompt(method_name, inputs, PROMPT_TEMPLATES.get(method_id))


def build_poem_prompt(method_name: str, keywords: List[str]) -> str:
    """签诗提示词：八句七言，只返回诗句"""
    topic = "、".join(keywords) if keywords else "运势"
    return (
        f"请以「{method_name}」为题，围绕以下主题写一首八句七言签诗：{topic}。\n"
        "第一行写签名与吉凶，例如：第十八签（上上签），之后每行两句，用逗号和句号分隔。\n"
        "只返回签诗本身，不要解释。\n"
    )

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
星盘固定数据表
"""

# 星盘上的 12 个点位，顺序即输出顺序
CHART_POINTS = ["太阳", "月亮", "水星", "金星", "火星", "木星",
                "土星", "天王星", "海王星", "冥王星", "上升点", "中天点"]

# 参与相位计算的行星（不含上升点、中天点）
ASPECT_PLANETS = CHART_POINTS[:10]

# 星座名（不带"座"字）
SIGNS = ["白羊", "金牛", "双子", "巨蟹", "狮子", "处女",
         "天秤", "天蝎", "射手", "摩羯", "水瓶", "双鱼"]

SIGN_SYMBOLS = {
    "♈": "白羊", "♉": "金牛", "♊": "双子", "♋": "巨蟹", "♌": "狮子", "♍": "处女",
    "♎": "天秤", "♏": "天蝎", "♐": "射手", "♑": "摩羯", "♒": "水瓶", "♓": "双鱼",
}

# 相位：名称 -> 角度
ASPECTS = {
    "合相": 0,
    "六分相": 60,
    "四分相": 90,
    "三分相": 120,
    "对分相": 180,
}

# 同义写法
ASPECT_ALIASES = {"反对相": "对分相", "冲相": "对分相", "刑相": "四分相", "拱相": "三分相"}

HARMONIOUS_ASPECTS = {"三分相", "六分相"}
TENSE_ASPECTS = {"四分相", "对分相"}

SIGN_ELEMENTS = {
    "白羊": "火", "狮子": "火", "射手": "火",
    "金牛": "土", "处女": "土", "摩羯": "土",
    "双子": "风", "天秤": "风", "水瓶": "风",
    "巨蟹": "水", "天蝎": "水", "双鱼": "水",
}

ELEMENT_TRAITS = {
    "火": "热情主动、行动力强，喜欢挑战与开创",
    "土": "务实稳重、脚踏实地，重视安全感与积累",
    "风": "思维敏捷、善于沟通，重视交流与新鲜感",
    "水": "情感细腻、直觉敏锐，富有同理心与想象力",
}

SUN_READINGS = {
    "火": "太阳落在火象星座，您的核心自我充满能量，适合担任开拓者和领导者的角色。",
    "土": "太阳落在土象星座，您的核心自我追求稳定，擅长把想法落实为可见的成果。",
    "风": "太阳落在风象星座，您的核心自我重视思想交流，在人际网络中如鱼得水。",
    "水": "太阳落在水象星座，您的核心自我敏感而深情，能体察他人未说出口的需要。",
}

MOON_READINGS = {
    "火": "月亮在火象星座，情绪来得快去得也快，需要通过行动来释放压力。",
    "土": "月亮在土象星座，内心需要规律和安稳的生活节奏带来安全感。",
    "风": "月亮在风象星座，通过倾诉和交流来消化情绪，需要精神上的陪伴。",
    "水": "月亮在水象星座，情感丰富细腻，需要被理解和温柔对待。",
}

ASCENDANT_READINGS = {
    "火": "上升在火象星座，给人的第一印象是自信、直接、富有感染力。",
    "土": "上升在土象星座，给人的第一印象是可靠、沉稳、值得信赖。",
    "风": "上升在风象星座，给人的第一印象是亲切、健谈、反应灵活。",
    "水": "上升在水象星座，给人的第一印象是温和、含蓄、善解人意。",
}

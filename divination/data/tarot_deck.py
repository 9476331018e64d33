#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
塔罗牌：22 张大阿卡纳 + 56 张小阿卡纳，以及牌阵定义
"""

MAJOR_ARCANA = [
    ("愚者", "象征新的开始和无限可能", "鲁莽冲动，计划欠周"),
    ("魔术师", "代表权力、意志和创造力", "能力未能发挥，易被误导"),
    ("女祭司", "暗示直觉、智慧和内在知识", "忽视内心声音，信息不明"),
    ("女皇", "象征富足、创造和滋养", "依赖他人，创造力受阻"),
    ("皇帝", "代表掌控、权威和稳定", "专断固执，秩序松动"),
    ("教皇", "暗示精神指引和传统", "墨守成规，或急于打破规矩"),
    ("恋人", "象征爱情、和谐与选择", "选择犹豫，关系失衡"),
    ("战车", "代表决心、意志力与成功", "方向迷失，进展受挫"),
    ("力量", "暗示勇气、力量和信心", "信心不足，情绪失控"),
    ("隐者", "象征反思、寻求真理和孤独", "过度封闭，与外界脱节"),
    ("命运之轮", "代表命运、变化与机遇", "时运低迷，变化不利"),
    ("正义", "暗示平衡、公正与真理", "有失公允，需承担后果"),
    ("倒吊人", "象征牺牲、让步和新视角", "无谓的牺牲，停滞不前"),
    ("死神", "代表结束、变革和重生", "抗拒改变，拖延结束"),
    ("节制", "暗示中庸、平衡与和谐", "失去节制，步调混乱"),
    ("恶魔", "象征诱惑、执着与束缚", "挣脱束缚，重获自由"),
    ("高塔", "代表突然变化、混乱与释放", "危机可控，余波未平"),
    ("星星", "暗示希望、启示与灵感", "信心动摇，希望渺茫"),
    ("月亮", "象征幻觉、直觉与潜意识", "迷雾渐散，真相显现"),
    ("太阳", "代表成功、喜悦与活力", "喜悦打折，成功延迟"),
    ("审判", "暗示重生、更新与决定", "自我怀疑，错失召唤"),
    ("世界", "象征完成、成就与圆满", "功亏一篑，尚欠圆满"),
]

SUITS = {
    "权杖": ("行动与热情", "火"),
    "圣杯": ("情感与关系", "水"),
    "宝剑": ("思想与冲突", "风"),
    "星币": ("物质与财富", "土"),
}

RANKS = ["王牌", "二", "三", "四", "五", "六", "七", "八", "九", "十", "侍从", "骑士", "王后", "国王"]

RANK_MEANINGS = [
    "新的开端与潜力", "选择与平衡", "合作与成长", "稳定与巩固", "冲突与失落",
    "和谐与给予", "考验与坚持", "变化与行动", "接近圆满", "周期的终点",
    "学习与消息", "行动与追求", "成熟与包容", "掌控与成就",
]


def build_deck():
    """
    构建 78 张牌

    Returns:
        list[dict]: name, arcana(major/minor), suit, upright, reversed
    """
    deck = []
    for name, upright, reversed_meaning in MAJOR_ARCANA:
        deck.append({
            "name": name,
            "arcana": "major",
            "suit": None,
            "upright": upright,
            "reversed": reversed_meaning,
        })
    for suit, (domain, _element) in SUITS.items():
        for rank, rank_meaning in zip(RANKS, RANK_MEANINGS):
            deck.append({
                "name": f"{suit}{rank}",
                "arcana": "minor",
                "suit": suit,
                "upright": f"在{domain}方面，{rank_meaning}",
                "reversed": f"在{domain}方面，{rank_meaning}受阻",
            })
    return deck


TAROT_DECK = build_deck()

# 牌阵：牌数 -> (牌阵名, 位置列表)
SPREADS = {
    3: ("三张牌阵", ["过去", "现在", "未来"]),
    5: ("五张牌阵", ["现状", "挑战", "根源", "建议", "结果"]),
    6: ("六芒星牌阵", ["过去", "现在", "未来", "对策", "环境", "结果"]),
    10: ("凯尔特十字牌阵", ["现状", "阻碍", "目标", "根基", "过去", "未来",
                          "自我", "环境", "希望与恐惧", "最终结果"]),
}

SPREAD_NAMES = {name: count for count, (name, _positions) in SPREADS.items()}

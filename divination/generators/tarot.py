#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
塔罗牌生成器 - 从 78 张牌中抽取不重复的牌，按牌阵位置解读
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional

from divination.core.seeded_sequence import SeededSequence
from divination.data.tarot_deck import SPREAD_NAMES, SPREADS, TAROT_DECK
from divination.generators.base import ContentGenerator, render_sections

DEFAULT_SPREAD_SIZE = 3


def resolve_spread_size(spread: Optional[str]) -> int:
    """牌阵名或牌数 -> 牌数，无法识别时使用三张牌阵"""
    if not spread:
        return DEFAULT_SPREAD_SIZE
    spread = spread.strip()
    if spread in SPREAD_NAMES:
        return SPREAD_NAMES[spread]
    for name, count in SPREAD_NAMES.items():
        if spread in name or name in spread:
            return count
    digits = "".join(ch for ch in spread if ch.isdigit())
    if digits and int(digits) in SPREADS:
        return int(digits)
    return DEFAULT_SPREAD_SIZE


@dataclass
class DrawnCard:
    position: str
    card: dict
    reversed: bool

    @property
    def name(self) -> str:
        return self.card["name"]

    @property
    def orientation(self) -> str:
        return "逆位" if self.reversed else "正位"

    @property
    def meaning(self) -> str:
        return self.card["reversed"] if self.reversed else self.card["upright"]


def draw_cards(seq: SeededSequence, size: int) -> List[DrawnCard]:
    if size not in SPREADS:
        raise ValueError(f"不支持的牌阵大小: {size}")
    _, positions = SPREADS[size]
    cards = seq.sample(TAROT_DECK, size)
    return [DrawnCard(pos, card, seq.chance(30)) for pos, card in zip(positions, cards)]


class TarotGenerator(ContentGenerator):
    """塔罗牌"""

    method_id = "tarot"
    STATIC_SECTIONS = [
        ("塔罗牌阵", "您抽到的塔罗牌为：愚者、星星、世界。这组牌面展示了您目前所处的状态和未来的可能发展。"),
        ("牌阵解读", "过去的经历已为您积累了宝贵经验，未来牌显示，若能坚持正确的方向，将会迎来重要突破。"),
        ("建议", "1. 保持开放的心态，接纳新的机会\n2. 不要急于做出重大决定\n3. 关注身体信号，保持身心平衡"),
    ]

    def _render(self, seq: SeededSequence, inputs: Dict[str, str]) -> str:
        size = resolve_spread_size(inputs.get("spread"))
        spread_name, _ = SPREADS[size]
        drawn = draw_cards(seq, size)

        question = inputs.get("question", "").strip()
        spread_text = f"牌阵名称：{spread_name}\n所抽牌面：" + "、".join(
            f"{d.name}（{d.orientation}）" for d in drawn
        )
        if question:
            spread_text = f"问题：{question}\n" + spread_text

        card_lines = [f"{d.position}：{d.name}（{d.orientation}），{d.meaning}" for d in drawn]

        majors = sum(1 for d in drawn if d.card["arcana"] == "major")
        reversed_count = sum(1 for d in drawn if d.reversed)
        suits = Counter(d.card["suit"] for d in drawn if d.card["suit"])
        parts = []
        if majors * 2 > size:
            parts.append(f"大阿卡纳占{majors}张，说明此事牵涉人生的重要课题，影响深远。")
        else:
            parts.append(f"大阿卡纳{majors}张，此事更多与日常选择有关，主动权在您手中。")
        if suits:
            suit, n = suits.most_common(1)[0]
            parts.append(f"{suit}牌出现{n}次，是本次牌阵的主导能量。")
        if reversed_count * 2 > size:
            parts.append("逆位牌较多，提示当前阻力较大，宜先调整心态再行动。")
        else:
            parts.append("正位牌居多，整体能量顺畅，可按计划推进。")

        final = drawn[-1]
        summary = f"最终落点为{final.name}（{final.orientation}），{final.meaning}。相信自己，做好准备，机会来了就大胆抓住。"

        return render_sections([
            ("塔罗牌阵", spread_text),
            ("牌面解读", "\n".join(card_lines)),
            ("牌阵解读", "".join(parts)),
            ("建议", "1. 保持开放的心态，接纳新的机会和观点\n2. 多听取他人意见，但最终决策应遵循内心指引\n3. 给自己足够的思考空间"),
            ("总结", summary),
        ])

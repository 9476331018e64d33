#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命理叙述用语池
"""

TRAITS = ["创造力", "领导力", "直觉", "耐心", "细心", "热情", "冷静", "理性", "感性", "随和"]

TRENDS = ["稳步上升", "波动起伏", "缓慢提升", "先抑后扬", "保持平稳"]

# 五行对应性格
ELEMENT_PERSONALITY = {
    "金": "刚毅果断，重情重义，做事讲究原则",
    "木": "仁慈正直，积极向上，富有进取心",
    "水": "聪慧灵活，善于变通，思维活跃",
    "火": "热情开朗，光明磊落，行动力强",
    "土": "稳重踏实，诚信宽厚，值得信赖",
}

# 五行对应适合的行业
ELEMENT_CAREERS = {
    "金": ["金融", "法律", "机械", "管理"],
    "木": ["教育", "文化", "医药", "园林"],
    "水": ["贸易", "物流", "传媒", "咨询"],
    "火": ["科技", "能源", "餐饮", "演艺"],
    "土": ["地产", "建筑", "农业", "行政"],
}

# 五行对应需关注的身体部位
ELEMENT_HEALTH = {
    "金": "呼吸系统",
    "木": "肝胆与筋骨",
    "水": "肾脏与泌尿系统",
    "火": "心血管系统",
    "土": "消化系统",
}

CAREER_STAGES = ["起步", "成长", "稳定", "转型", "辉煌"]

CAREER_ADVICES = [
    "建议持续学习新技能，提升专业能力",
    "适合大胆创新，尝试新的领域",
    "宜稳健发展，避免冒险",
    "可以寻求合作伙伴，共同发展",
    "应该加强人脉拓展，寻求贵人相助",
]

WEALTH_LEVELS = ["较好", "波动较大", "稳步增长", "需要谨慎规划", "潜力巨大"]

WEALTH_SOURCES = ["主要来自固定收入", "可通过投资获得额外收益", "有意外之财的可能", "需要勤劳积累"]

WEALTH_ADVICES = [
    "适合投资理财",
    "宜稳健理财，避免风险投资",
    "可适当进行房产投资",
    "应优先偿还债务，稳固财务基础",
    "建议增加被动收入来源",
]

LOVE_STATES = [
    "感情线条清晰但曲折",
    "感情发展较为平稳",
    "感情经历波折但最终圆满",
    "需要主动追求才能获得理想感情",
    "容易吸引异性但需谨慎选择",
]

LOVE_TRAITS = [
    "您在感情中较为理想化",
    "您在感情中注重精神交流",
    "您在感情中渴望安全感",
    "您在感情中追求刺激与新鲜感",
    "您在感情中重视忠诚与信任",
]

LOVE_ADVICES = [
    "需要找到理解您独立精神的伴侣",
    "适合与性格互补的人建立关系",
    "应该提高沟通能力，避免误解",
    "宜放下戒备，敞开心扉接受真爱",
    "建议多关注对方需求，增进感情和谐",
]

HEALTH_STATES = ["总体良好", "需要注意保养", "有潜在隐患", "较为稳定", "需定期检查"]

HEALTH_ADVICES = [
    "建议保持规律作息，避免熬夜",
    "适当增加有氧运动，增强体质",
    "注意饮食均衡，少食多餐",
    "建议定期体检，预防疾病",
    "可尝试冥想或瑜伽，缓解压力",
]

GENERAL_ADVICES = [
    "培养耐心和持续力，不要因短期困难放弃长远目标",
    "加强情绪管理，避免冲动决策",
    "建立健康的生活习惯，包括饮食、运动和休息",
    "学习财务规划，合理配置资产",
    "在人际关系中保持真诚，但也要有适当边界",
    "定期反思与调整，使人生方向与内心期望一致",
    "多与积极向上的人交往，远离负能量",
    "培养一项终身爱好，丰富精神世界",
    "学会感恩，保持积极乐观的心态",
    "关注精神成长，提升内在修养",
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
关键词 -> 解读 对照表（解梦、数字命理、奇门遁甲、通用方法）
"""

# 梦境意象：(关键词列表, 意象名称, 解读)
DREAM_SYMBOLS = [
    (["水", "海", "河", "湖", "雨"], "水",
     "水象征情感与潜意识。水流平静清澈，代表内心安宁、财源渐进；波涛汹涌则暗示情绪起伏，需要给自己留出平复的时间。"),
    (["飞", "天空", "翅膀", "云"], "飞翔",
     "梦见飞翔代表渴望自由、摆脱束缚，也反映出近期信心增强，想要突破现状。若飞得吃力，说明现实中仍有牵绊。"),
    (["追", "跑", "逃", "躲"], "追逐",
     "被追赶的梦常与逃避有关，现实中可能有一件事您一直没有正面处理。停下来面对它，压力反而会减轻。"),
    (["蛇"], "蛇",
     "蛇在传统解梦中与财运和智慧相关，也可能暗示身边有需要提防的人或事，保持警觉即可。"),
    (["牙", "掉牙", "牙齿"], "掉牙",
     "梦见掉牙多与焦虑有关，反映对自身形象、能力或亲人健康的担忧，建议多与家人沟通。"),
    (["考试", "迟到", "作业"], "考试",
     "考试或迟到的梦提示您对某项评价或期限感到紧张，说明您对自己要求较高，适当放松会更有效率。"),
    (["死", "去世", "葬礼"], "死亡",
     "梦中的死亡通常象征结束与新生，意味着某个阶段即将过去，新的开始正在到来，并非不祥之兆。"),
    (["钱", "金子", "捡钱", "财宝"], "钱财",
     "梦见钱财反映对安全感与价值认同的需求，近期宜踏实积累，不宜贪图意外之财。"),
    (["火", "燃烧", "着火"], "火",
     "火象征热情与转变，火势旺盛主事业兴旺，但若火势失控，则提醒您注意情绪和冲动。"),
    (["房子", "家", "屋"], "房屋",
     "房屋代表自我与内心世界，房间明亮整洁说明状态良好，破旧杂乱则提示需要整理生活与情绪。"),
    (["孩子", "婴儿", "宝宝"], "婴儿",
     "婴儿象征新的想法、计划或关系的萌芽，需要您耐心呵护，才能逐步成长。"),
    (["狗", "猫", "动物"], "动物",
     "动物常代表本能与直觉。友善的动物预示贵人相助，凶猛的动物则提醒您留意被压抑的情绪。"),
]

DREAM_DEFAULT = "您的梦境反映了潜意识中正在处理的情绪和经历。梦中的场景与人物往往是内心状态的投射，建议结合近期生活中印象深刻的事情来理解它。"

# 数字命理：数字 -> (关键词, 解读)
NUMBER_MEANINGS = {
    1: ("开创", "独立自主、富有开创精神，天生的领导者，适合开拓新领域。"),
    2: ("协调", "温和细腻、善于合作，是天生的协调者，在团队中发挥润滑作用。"),
    3: ("表达", "乐观开朗、富有创造力，擅长表达与沟通，适合创意类工作。"),
    4: ("秩序", "踏实稳健、重视秩序，做事有条理，是可靠的执行者。"),
    5: ("自由", "热爱自由、勇于冒险，适应力强，喜欢变化与新鲜体验。"),
    6: ("责任", "富有责任感和爱心，重视家庭与社群，乐于照顾他人。"),
    7: ("探索", "喜欢思考、追求真理，具有分析力和洞察力，适合研究与学术。"),
    8: ("成就", "目标明确、执行力强，对物质成就和权威有天然的掌控力。"),
    9: ("博爱", "胸怀宽广、富有同情心，追求理想，乐于为他人付出。"),
    11: ("灵感", "卓越数字11，直觉敏锐、富有灵性，能够启发和影响他人。"),
    22: ("建造", "卓越数字22，兼具远见与实干能力，能把宏大构想变为现实。"),
    33: ("奉献", "卓越数字33，无私奉献、慈悲为怀，是天生的疗愈者与导师。"),
}

MASTER_NUMBERS = (11, 22, 33)

# 英文字母 -> 毕达哥拉斯数值
LETTER_VALUES = {chr(ord("a") + i): (i % 9) + 1 for i in range(26)}

# 奇门遁甲八门：(门名, 吉凶, 主事)
EIGHT_GATES = [
    ("休门", "吉", "休养生息，宜求职、拜访贵人、调养身体"),
    ("生门", "吉", "生机勃发，宜求财、置业、开展新事业"),
    ("伤门", "凶", "多有损伤，宜讨债、捕猎，不宜出行与谈判"),
    ("杜门", "平", "闭塞隐藏，宜躲避、修身，不宜公开行事"),
    ("景门", "平", "文书光彩，宜考试、宣传、献策"),
    ("死门", "凶", "沉滞不前，宜吊丧、收尾，不宜开创"),
    ("惊门", "凶", "惊恐不安，宜诉讼对峙，需防口舌是非"),
    ("开门", "吉", "开阔通达，宜开业、上任、远行"),
]

NINE_STARS = [
    ("天蓬星", "智谋多变，需防小人"),
    ("天芮星", "宜修学求师，不利冒进"),
    ("天冲星", "行动迅速，利于出击"),
    ("天辅星", "文昌辅佐，利考试求学"),
    ("天禽星", "居中统摄，诸事平顺"),
    ("天心星", "谋略周全，利于求医问计"),
    ("天柱星", "宜守不宜攻，防口舌"),
    ("天任星", "稳重厚道，利置业耕耘"),
    ("天英星", "光明显耀，利宣传展示"),
]

# 奇门问事主题 -> 对应用神之门
QIMEN_TOPIC_GATES = {
    "wealth": "生门",
    "career": "开门",
    "relationship": "休门",
    "study": "景门",
    "lawsuit": "惊门",
}

QIMEN_TOPIC_KEYWORDS = {
    "wealth": ["财", "钱", "投资", "生意", "理财"],
    "career": ["工作", "事业", "升职", "创业", "面试"],
    "relationship": ["感情", "婚姻", "恋爱", "对象", "桃花"],
    "study": ["考试", "学习", "读书", "升学", "论文"],
    "lawsuit": ["官司", "诉讼", "纠纷", "合同"],
}

# 通用方法的静态章节：方法ID -> [(标题, 内容)]
GENERIC_SECTIONS = {
    "ziwei": [
        ("命宫主星", "您的命宫主星显示您性格坚毅、目标感强，做事讲求效率，适合在有挑战的环境中成长。"),
        ("十二宫概览", "命宫、财帛宫、官禄宫三方会照，整体格局平稳。夫妻宫星曜温和，感情中注重理解与陪伴。"),
        ("流年运势", "今年流年走势先抑后扬，上半年宜积累，下半年机会增多，可把握时机稳步推进计划。"),
    ],
    "palmistry": [
        ("手相解读", "您的手相显示生命线长而清晰，预示健康长寿；事业线明显，暗示事业有成。"),
        ("感情线分析", "您的感情线显示您重情重义，在感情中注重稳定和忠诚。"),
        ("建议", "1. 保持健康生活方式\n2. 在事业上继续努力\n3. 在感情中保持真诚"),
    ],
    "face": [
        ("面相解读", "您的面相显示额头饱满，代表聪明才智；眉毛清晰有力，暗示决断力强。"),
        ("性格分析", "从面相来看，您性格坚毅果断，有较强的领导能力和责任感。"),
        ("建议", "1. 发挥领导才能\n2. 注意情绪管理\n3. 保持积极心态"),
    ],
}

GENERIC_DEFAULT_SECTIONS = [
    ("分析结果", "根据您提供的信息，此次解读暂时以本地分析的形式呈现，整体运势平稳，宜稳中求进。"),
    ("建议", "1. 保持积极心态\n2. 做事循序渐进\n3. 多与亲友沟通交流"),
]

# 通用主题关键词 -> 补充解读
GENERIC_TOPIC_READINGS = [
    (["工作", "事业", "升职", "创业"], "事业", "事业方面宜脚踏实地，积累口碑，贵人运在下半年逐渐显现。"),
    (["感情", "婚姻", "恋爱", "桃花"], "感情", "感情方面以真诚为本，多倾听对方想法，关系会更加稳固。"),
    (["财", "钱", "投资", "理财"], "财运", "财运方面正财稳定，投资宜稳健，避免跟风追高。"),
    (["健康", "身体", "生病"], "健康", "健康方面注意作息规律，适度运动，少熬夜。"),
]

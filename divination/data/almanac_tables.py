#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
黄历固定数据表
"""

# 宜做的事情
GOOD_ACTIVITIES = [
    "祭祀", "祈福", "求嗣", "开光", "嫁娶", "会亲友", "开市", "交易", "入学", "习艺",
    "纳财", "纳畜", "牧养", "安床", "动土", "上梁", "修造", "起基", "竖柱", "安门",
    "栽种", "纳采", "订盟", "冠笄", "裁衣", "合帐", "经络", "安葬", "修坟", "破土",
]

# 忌做的事情（与宜有重叠，生成后需做交集过滤）
BAD_ACTIVITIES = [
    "诉讼", "安葬", "修坟", "开市", "动土", "祭祀", "出行", "赴任", "嫁娶", "开张",
    "搬迁", "入宅", "安床", "交易", "栽种", "开仓", "纳财", "修造", "动工", "竖柱",
]

DIRECTIONS = ["东", "南", "西", "北", "东南", "东北", "西南", "西北"]

# 方位神：喜神、财神、福神所在方位必为吉方
DIRECTION_DEITIES = ["喜神", "财神", "福神"]

# 胎神占方
FETUS_GOD_POSITIONS = ["床头", "床尾", "灶前", "厨房", "仓库", "房门", "东南", "西北"]

# 值年九星
YEAR_STARS = ["贪狼", "巨门", "禄存", "文曲", "廉贞", "武曲", "破军", "左辅", "右弼"]

# 二十八星宿
DAY_STARS = [
    "角木蛟", "亢金龙", "氐土貉", "房日兔", "心月狐", "尾火虎", "箕水豹",
    "斗木獬", "牛金牛", "女土蝠", "虚日鼠", "危月燕", "室火猪", "壁水貐",
    "奎木狼", "娄金狗", "胃土雉", "昴日鸡", "毕月乌", "觜火猴", "参水猿",
    "井木犴", "鬼金羊", "柳土獐", "星日马", "张月鹿", "翼火蛇", "轸水蚓",
]

# 煞方，按地支三合局循环
SHA_DIRECTIONS = ["南", "东", "北", "西"]

# 时辰宜做之事
HOUR_ACTIVITIES = [
    "静坐养神", "整理文书", "拜访亲友", "洽谈合作", "出门远行", "读书学习",
    "处理账目", "运动锻炼", "祈福许愿", "家庭聚会", "早睡休息", "规划明日",
]

# 日运总结
DAY_SUMMARIES = {
    "great": "今天是个非常好的日子，多数方位都很吉利，适合进行重要活动。",
    "good": "今天整体运势不错，特别适合{good}。如果您有重要决定要做，今天是个好日子。",
    "plain": "今天运势一般，建议谨慎行事，特别避免{bad}等活动。",
}

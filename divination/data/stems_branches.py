#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
天干地支、生肖、五行与简化农历标签
"""

TIAN_GAN = ["甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸"]
DI_ZHI = ["子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥"]
ZODIAC_ANIMALS = ["鼠", "牛", "虎", "兔", "龙", "蛇", "马", "羊", "猴", "鸡", "狗", "猪"]

FIVE_ELEMENTS = ["金", "木", "水", "火", "土"]

# 天干五行
GAN_ELEMENT = {
    "甲": "木", "乙": "木", "丙": "火", "丁": "火", "戊": "土",
    "己": "土", "庚": "金", "辛": "金", "壬": "水", "癸": "水",
}

# 地支五行
ZHI_ELEMENT = {
    "子": "水", "丑": "土", "寅": "木", "卯": "木", "辰": "土", "巳": "火",
    "午": "火", "未": "土", "申": "金", "酉": "金", "戌": "土", "亥": "水",
}

LUNAR_MONTHS = ["正月", "二月", "三月", "四月", "五月", "六月",
                "七月", "八月", "九月", "十月", "冬月", "腊月"]

LUNAR_DAYS = [
    "初一", "初二", "初三", "初四", "初五", "初六", "初七", "初八", "初九", "初十",
    "十一", "十二", "十三", "十四", "十五", "十六", "十七", "十八", "十九", "二十",
    "廿一", "廿二", "廿三", "廿四", "廿五", "廿六", "廿七", "廿八", "廿九", "三十",
]

WEEKDAY_NAMES = ["星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期日"]

# 十二时辰，(名称, 时间段)
SHICHEN = [
    ("子时", "23:00-00:59"), ("丑时", "01:00-02:59"), ("寅时", "03:00-04:59"),
    ("卯时", "05:00-06:59"), ("辰时", "07:00-08:59"), ("巳时", "09:00-10:59"),
    ("午时", "11:00-12:59"), ("未时", "13:00-14:59"), ("申时", "15:00-16:59"),
    ("酉时", "17:00-18:59"), ("戌时", "19:00-20:59"), ("亥时", "21:00-22:59"),
]

# 太阳星座起始日期 (月, 日, 名称)，按日期升序
CONSTELLATION_STARTS = [
    (1, 20, "水瓶座"), (2, 19, "双鱼座"), (3, 21, "白羊座"), (4, 20, "金牛座"),
    (5, 21, "双子座"), (6, 22, "巨蟹座"), (7, 23, "狮子座"), (8, 23, "处女座"),
    (9, 23, "天秤座"), (10, 24, "天蝎座"), (11, 23, "射手座"), (12, 22, "摩羯座"),
]

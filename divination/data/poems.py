#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
签诗：预先写好的八句诗，按主题归类
"""

# 每首：(签名, 吉凶, 主题关键词, 八句诗)
POEMS = [
    ("上上签", "大吉", ["事业", "工作", "功名", "升职", "考试"], [
        "春风得意马蹄疾", "一日看尽长安花",
        "青云有路终须到", "金榜题名自有涯",
        "莫道前程多险阻", "龙门一跃便腾霞",
        "守得初心勤耕作", "他年桃李满天涯",
    ]),
    ("上签", "吉", ["财运", "财", "钱", "投资", "生意"], [
        "细水长流汇江海", "涓涓不息自成渊",
        "取财有道心安稳", "积少成多福禄全",
        "莫贪意外横来利", "须防浮云蔽晴天",
        "勤俭持家根基厚", "仓廪丰盈岁岁年",
    ]),
    ("上签", "吉", ["感情", "婚姻", "姻缘", "恋爱", "桃花"], [
        "月下老人系红绳", "千里姻缘一线牵",
        "相逢何必曾相识", "心有灵犀意自连",
        "风雨同舟情愈笃", "花前月下共婵娟",
        "莫因小事生嫌隙", "执手偕老到百年",
    ]),
    ("中签", "平", ["健康", "身体", "平安"], [
        "松柏常青耐岁寒", "身心调养自安然",
        "早眠早起精神爽", "少思少虑气血宽",
        "饮食有节须谨记", "劳逸相宜莫强干",
        "病从口入祸从出", "修身养性保平安",
    ]),
    ("中签", "平", ["出行", "搬家", "迁移", "远行"], [
        "行路难兮行路难", "山重水复疑无路",
        "柳暗花明又一村", "前途自有贵人助",
        "择吉而行方顺遂", "三思而后定去住",
        "莫因一时贪近便", "稳步徐行终可渡",
    ]),
    ("中下签", "慎", ["诉讼", "官司", "纠纷", "口舌"], [
        "是非只为多开口", "烦恼皆因强出头",
        "退一步时天地阔", "忍三分处怨仇休",
        "和气生财家业旺", "争强好胜祸根留",
        "冤家宜解不宜结", "明月清风自悠悠",
    ]),
    ("中签", "平", ["学业", "读书", "学习", "考试"], [
        "书山有路勤为径", "学海无涯苦作舟",
        "十年寒窗无人问", "一举成名天下求",
        "莫叹今朝功未就", "滴水穿石志不休",
        "名师指点开茅塞", "厚积薄发上高楼",
    ]),
    ("上签", "吉", ["运势", "综合", "总论", "命运"], [
        "否极泰来运自通", "云开雾散见晴空",
        "前程似锦由心造", "福泽绵长在德中",
        "遇事从容多思量", "逢人和气少争锋",
        "天时地利人和备", "万事顺遂喜气浓",
    ]),
]

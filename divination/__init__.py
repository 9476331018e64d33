#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
占卜内容生成与解析引擎

- 基于种子的确定性内容生成（黄历、八字、周易、塔罗、星盘等）
- 多策略分段解析，保证任何文本都能得到非空的分段结果
- 结果组装、数据修复与持久化
"""

__version__ = "1.0.0"

"""日期工具"""

from datetime import datetime, date, timedelta
from typing import Union
import re

import pytz


def format_date(dt: Union[datetime, date, str]) -> str:
    """格式化日期为YYYY-MM-DD格式"""
    if isinstance(dt, str):
        try:
            dt = datetime.strptime(dt, "%Y-%m-%d").date()
        except ValueError:
            try:
                dt = datetime.strptime(dt, "%Y/%m/%d").date()
            except ValueError:
                raise ValueError(f"无法解析日期格式: {dt}")
    elif isinstance(dt, datetime):
        dt = dt.date()

    return dt.strftime("%Y-%m-%d")


def validate_date(date_str: str) -> bool:
    """验证日期格式"""
    pattern = r'^\d{4}-\d{2}-\d{2}$'
    if not re.match(pattern, date_str):
        return False

    try:
        datetime.strptime(date_str, "%Y-%m-%d")
        return True
    except ValueError:
        return False


def add_days(date_str: str, days: int) -> str:
    """在日期上加天数"""
    base = datetime.strptime(format_date(date_str), "%Y-%m-%d")
    return (base + timedelta(days=days)).strftime("%Y-%m-%d")


def get_today(timezone: str = "UTC") -> str:
    """获取指定时区的今天日期，未知时区回退到UTC"""
    try:
        tz = pytz.timezone(timezone)
    except pytz.exceptions.UnknownTimeZoneError:
        tz = pytz.utc
    return datetime.now(tz).strftime("%Y-%m-%d")

"""Catálogo estático de mensajes (en/zh).

Nota:
- Esto es contenido, no lógica: las claves coinciden con los valores de
  `CrackTimeBucket` y `Tip` para que el analizador no conozca los textos.
"""

from __future__ import annotations

from core.domain.language import Language

_CATALOGUE: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "title": "Password Generator",
        "subtitle": "100% Offline · Privacy First · Random encryption",
        "secure_output": "Secure Output",
        "analysis": "Local Analysis Engine",
        "crack_time": "Estimated Crack Time",
        "entropy": "Password Entropy",
        "bits": "bits",
        "history": "History",
        "no_history": "No History",
        "copied": "Copied",
        "security_tips": "Security Tips",
        "zero_knowledge": "Zero Knowledge · No Internet",
        "time.instant": "Instant",
        "time.seconds": "seconds",
        "time.minutes": "minutes",
        "time.hours": "hours",
        "time.days": "days",
        "time.years": "years",
        "time.centuries": "centuries",
        "time.forever": "Uncrackable before universe ends",
        "tips.length": "Increasing length beyond 12 significantly boosts security",
        "tips.symbols": "Adding symbols (!@#$) resists dictionary attacks",
        "tips.numbers": "Numbers break predictable patterns",
        "tips.perfect": "This password meets the highest security standards",
        "tips.uuid_info": "UUID v4 is random-based with negligible collision risk",
    },
    Language.CHINESE: {
        "title": "密码生成器",
        "subtitle": "100% 离线生成 · 隐私优先 · 随机加密",
        "secure_output": "安全输出",
        "analysis": "本地分析引擎",
        "crack_time": "暴力破解预估时间",
        "entropy": "密码熵值",
        "bits": "位",
        "history": "历史记录",
        "no_history": "暂无历史",
        "copied": "已复制",
        "security_tips": "安全建议",
        "zero_knowledge": "零知识生成 · 绝不联网",
        "time.instant": "瞬间",
        "time.seconds": "秒",
        "time.minutes": "分钟",
        "time.hours": "小时",
        "time.days": "天",
        "time.years": "年",
        "time.centuries": "世纪",
        "time.forever": "宇宙终结前无法破解",
        "tips.length": "增加长度到 12 位以上可以极大提升安全性",
        "tips.symbols": "加入特殊符号 (!@#$) 能有效抵御字典攻击",
        "tips.numbers": "数字能打乱字符规律",
        "tips.perfect": "该密码符合最高安全准则",
        "tips.uuid_info": "UUID v4 基于随机数，碰撞概率极低",
    },
}


def message(key: str, language: Language | None = None) -> str:
    """Devuelve el texto para `key`; cae a inglés si falta la traducción."""

    language = language or Language.default()
    catalogue = _CATALOGUE.get(language, _CATALOGUE[Language.ENGLISH])
    if key in catalogue:
        return catalogue[key]
    return _CATALOGUE[Language.ENGLISH][key]

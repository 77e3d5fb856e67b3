"""Data-engineer intent rules: databases, schemas, migrations, query tuning."""

from __future__ import annotations

from agentroute.patterns.models import PatternRule, rx

DATA_INTENT_RULES: tuple[PatternRule, ...] = (
    PatternRule(rx(r"schema\.prisma"), 0.95, "Prisma schema"),
    PatternRule(rx(r"migration"), 0.9, "Database migration"),
    PatternRule(rx(r"\.sql$"), 0.9, "SQL file"),
    PatternRule(
        rx(r"database|데이터베이스|DB\s*(?:설계|스키마|마이그레이션)"), 0.9, "Database design"
    ),
    PatternRule(rx(r"스키마|schema\s*design"), 0.9, "Schema design"),
    PatternRule(rx(r"(?<![a-z])ERD(?![a-z])|entity.?relationship"), 0.9, "ERD design"),
    PatternRule(rx(r"쿼리\s*최적화|query\s*optim"), 0.85, "Query optimization"),
    PatternRule(rx(r"인덱스|index(?:ing)?"), 0.85, "Indexing"),
    PatternRule(rx(r"정규화|normaliz"), 0.85, "Normalization"),
)

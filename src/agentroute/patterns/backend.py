"""Backend-developer intent rules: server frameworks, API styles, server concerns."""

from __future__ import annotations

from agentroute.patterns.models import PatternRule, rx

BACKEND_INTENT_RULES: tuple[PatternRule, ...] = (
    PatternRule(rx(r"nestjs|nest\.js"), 0.95, "NestJS"),
    PatternRule(rx(r"express\.js|express\s+서버|express\s+server"), 0.95, "Express"),
    PatternRule(rx(r"fastify|koa\.js|(?<![a-z])hapi(?![a-z])"), 0.95, "Node.js Framework"),
    PatternRule(rx(r"django|flask|fastapi"), 0.95, "Python Framework"),
    PatternRule(rx(r"spring\s*boot|spring\s*framework"), 0.95, "Spring Boot"),
    PatternRule(rx(r"(?<![a-z])(?:gin|echo|fiber)(?![a-z])"), 0.9, "Go Framework"),
    PatternRule(rx(r"(?<![a-z])rails(?![a-z])|ruby\s+on\s+rails"), 0.95, "Ruby on Rails"),
    PatternRule(rx(r"REST\s*API|RESTful"), 0.9, "REST API"),
    PatternRule(rx(r"GraphQL\s*(?:API|서버|server|스키마|schema)"), 0.9, "GraphQL"),
    PatternRule(rx(r"gRPC|protobuf"), 0.9, "gRPC"),
    PatternRule(
        rx(r"API\s*(?:설계|개발|구현|design|develop|implement)"), 0.9, "API Development"
    ),
    PatternRule(
        rx(r"서버\s*(?:개발|구현|로직)|server.?side\s*(?:logic|develop)"),
        0.85,
        "Server Development",
    ),
    PatternRule(
        rx(r"백엔드\s*(?:개발|구현|로직)|backend\s*(?:develop|logic|implement)"),
        0.85,
        "Backend Development",
    ),
    PatternRule(rx(r"미들웨어|middleware"), 0.85, "Middleware"),
    PatternRule(rx(r"인증\s*서버|auth.{0,80}server|OAuth\s*서버"), 0.85, "Auth Server"),
    PatternRule(rx(r"웹소켓|websocket|socket\.io"), 0.85, "WebSocket"),
    PatternRule(rx(r"마이크로서비스|microservice"), 0.85, "Microservice"),
)

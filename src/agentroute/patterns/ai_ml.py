"""AI/ML-engineer intent rules: ML frameworks, LLM integration, embeddings.

Confidence levels:
    0.95  PyTorch, TensorFlow, HuggingFace, LangChain, vendor LLM SDKs
    0.90  training, fine-tuning, RAG, prompt engineering, LLM development
    0.85  embeddings, inference, NLP, computer vision, generic AI models
"""

from __future__ import annotations

from agentroute.patterns.models import PatternRule, rx

AI_ML_INTENT_RULES: tuple[PatternRule, ...] = (
    PatternRule(rx(r"pytorch|tensorflow|keras|(?<![a-z])jax(?![a-z])"), 0.95, "ML Framework"),
    PatternRule(rx(r"hugging\s*face|transformers|diffusers"), 0.95, "HuggingFace"),
    PatternRule(rx(r"langchain|llama.?index|llamaindex"), 0.95, "LLM Framework"),
    PatternRule(rx(r"openai\s*(?:api|sdk)|anthropic\s*(?:api|sdk)"), 0.95, "LLM API"),
    PatternRule(
        rx(r"machine\s*learning|(?<![a-z])ML\s*(?:모델|model|파이프라인|pipeline)"),
        0.9,
        "Machine Learning",
    ),
    PatternRule(rx(r"딥\s*러닝|deep\s*learning|신경망|neural\s*network"), 0.9, "Deep Learning"),
    PatternRule(
        rx(r"모델\s*학습|train.{0,80}model|fine.?tun|파인\s*튜닝"), 0.9, "Model Training"
    ),
    PatternRule(
        rx(r"(?<![a-z])RAG(?![a-z])|retrieval.{0,80}augment|검색\s*증강"), 0.9, "RAG"
    ),
    PatternRule(rx(r"프롬프트\s*엔지니어링|prompt\s*engineer"), 0.9, "Prompt Engineering"),
    PatternRule(
        rx(r"LLM\s*(?:개발|develop|구현|implement|통합|integrat)"), 0.9, "LLM Development"
    ),
    PatternRule(rx(r"임베딩|embedding|벡터\s*(?:DB|database|저장)"), 0.85, "Embeddings"),
    PatternRule(rx(r"추론|inference|predict|예측\s*모델"), 0.85, "Inference"),
    PatternRule(
        rx(r"(?<![a-z])AI\s*(?:모델|model|에이전트|agent|챗봇|chatbot)"), 0.85, "AI Model/Agent"
    ),
    PatternRule(rx(r"자연어\s*처리|(?<![a-z])NLP(?![a-z])|텍스트\s*분석"), 0.85, "NLP"),
    PatternRule(
        rx(r"컴퓨터\s*비전|computer\s*vision|이미지\s*인식"), 0.85, "Computer Vision"
    ),
)

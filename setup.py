from setuptools import setup, find_packages

setup(
    name="ai_gateway",
    version="0.1.0",
    description="Single generation interface over Gemini, OpenAI and Anthropic models with usage and cost accounting",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"ai_gateway.core.models": ["models.yaml"]},
    python_requires=">=3.10",
    install_requires=[
        "anthropic",
        "google-genai",
        "openai",
        "pyyaml",
        "tiktoken",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "ai-gateway-models=ai_gateway.main:main",
        ],
    },
)

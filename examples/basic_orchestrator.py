"""
basic_orchestrator.py — Minimal ai3 orchestrator example.

Sends the same prompt twice through the cached path; the second answer is
served from the query cache without calling the provider.

Usage:
    export AI3_COMPUTE_MODEL=gpt-4.1-mini
    export AI3_COMPUTE_API_KEY=sk-...
    python examples/basic_orchestrator.py
"""

from ai3 import create_orchestrator_from_env


async def main() -> None:
    orchestrator = create_orchestrator_from_env()

    for _ in range(2):
        answer = await orchestrator.process_request(
            {
                "action": "cached-compute",
                "payload": "Create electronic music",
                "user_id": "workflow_user",
            }
        )
        print(answer)

    print(orchestrator.stats())


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())

"""Example demonstrating blocking and async retry loops."""

import asyncio

from retryfn import (
    ConstantBackoff,
    Err,
    ExponentialBackoff,
    FailedAttempt,
    IteratorEnded,
    Ok,
    Retry,
    retry,
    retry_anyio,
    retry_async,
)


def flaky_read(op):
    """Simulates a flaky read that succeeds on the 3rd attempt."""
    print(f"  Attempt {op.retries + 1} (waited {op.total_delay})...", end=" ")

    if op.retries < 2:
        print("❌ Failed (simulated error)")
        return Retry()

    print("✅ Success!")
    return Ok({"status": "ok", "data": "file contents"})


async def flaky_api_call(op):
    """Simulates an API that is down for good after 3 attempts."""
    print(f"  Attempt {op.retries + 1}...", end=" ")

    if op.retries >= 2:
        print("💥 Giving up")
        return Err("API permanently unavailable")

    print("❌ Failed (simulated error)")
    return Retry()


async def main():
    print("🔄 Testing Retry Loops\n")

    # Example 1: Blocking retry with constant delay
    print("Example 1: Flaky read that succeeds on 3rd attempt")
    result = retry(ConstantBackoff.from_millis(200), flaky_read)
    print(f"  Result: {result}\n")

    # Example 2: Async retry with exponential backoff
    print("Example 2: API that fails for good")
    try:
        await retry_async(ExponentialBackoff.from_millis(100), flaky_api_call)
    except FailedAttempt as e:
        print(f"  Error: {e}\n")

    # Example 3: Finite schedule using the anyio sleep
    print("Example 3: Strategy that runs out")

    async def never_ready(op):
        return Retry()

    try:
        await retry_anyio(ConstantBackoff.from_millis(50).take(4), never_ready)
    except IteratorEnded as e:
        print(f"  Error: {e}\n")

    print("✅ All retry examples completed!")


if __name__ == "__main__":
    asyncio.run(main())

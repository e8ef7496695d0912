import asyncio

import pytest

from soltrade.subscription_handle import SubscriptionHandle


@pytest.mark.asyncio
async def test_shutdown_unsubscribes_and_cancels():
    calls = []
    task = asyncio.create_task(asyncio.sleep(3600))
    handle = SubscriptionHandle(task=task, unsub_fn=lambda: calls.append("unsub"))
    await handle.shutdown()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert calls == ["unsub"]
    assert task.cancelled()


@pytest.mark.asyncio
async def test_unsubscribe_happens_before_cancel():
    seen = []
    task = asyncio.create_task(asyncio.sleep(3600))
    handle = SubscriptionHandle(task=task, unsub_fn=lambda: seen.append(task.cancelling()))
    await handle.shutdown()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert seen == [0]
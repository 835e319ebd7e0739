"""Async dispatch — fare computations on a worker, correlated by call id."""

from cab_fare.dispatch.channel import Channel, ChannelFactory, ThreadWorkerChannel
from cab_fare.dispatch.dispatcher import FareDispatcher
from cab_fare.dispatch.worker import handle_message

__all__ = [
    "Channel",
    "ChannelFactory",
    "ThreadWorkerChannel",
    "FareDispatcher",
    "handle_message",
]

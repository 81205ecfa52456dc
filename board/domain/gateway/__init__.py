"""Gateways to external stores the domain depends on."""

from board.domain.gateway.like_counter import LikeCounterGateway

__all__ = ["LikeCounterGateway"]

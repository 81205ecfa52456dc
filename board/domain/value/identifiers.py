"""Strongly typed identifiers for board domain entities.

Identifiers are assigned by the relational store on insert, so they are
plain positive integers wrapped in NewType to keep them from being mixed up.
"""

from typing import NewType

PostId = NewType("PostId", int)
TagId = NewType("TagId", int)
CommentId = NewType("CommentId", int)

# Author/actor identity as handed to us by the (external) auth layer
UserName = NewType("UserName", str)

# -*- coding: utf-8 -*-
"""
Post Store

Owns the canonical set of Post records. Every write commits its own
transaction, so a record is visible to later reads as soon as the call returns.
"""
from typing import List

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from postboard import db
from postboard.models import Post


class PostNotFound(LookupError):
    """Raised when no Post exists for the given id"""

    def __init__(self, post_id):
        super().__init__(f'Post {post_id} not found')
        self.post_id = post_id


class PostStore:
    """Retrieve and persist Post records"""

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def find_all(self) -> List[Post]:
        """Return every stored post, oldest id first"""
        return self.session.execute(
            db.select(Post).order_by(Post.id.asc())
        ).scalars().all()

    def count(self) -> int:
        return self.session.execute(
            db.select(db.func.count(Post.id))
        ).scalar_one()

    def find_by_id(self, post_id) -> Post:
        """Look up a post by id

        Raises:
            PostNotFound: no post with that id exists
        """
        if not isinstance(post_id, int) or isinstance(post_id, bool) or post_id < 1:
            raise PostNotFound(post_id)

        post = self.session.get(Post, post_id)
        if post is None:
            raise PostNotFound(post_id)
        return post

    def save(self, post: Post) -> Post:
        """Insert the post when it has no id yet, otherwise update the stored record

        Returns:
            The saved post, with its id assigned

        Raises:
            PostNotFound: the post carries an id that is not stored
        """
        if post.id is None:
            self.session.add(post)
            action = f"inserting post {post.title!r}"
        else:
            action = f"updating post {post.id}"
            if post not in self.session:
                if self.session.get(Post, post.id) is None:
                    raise PostNotFound(post.id)
                post = self.session.merge(post)
        self._commit(action)
        return post

    def delete(self, post: Post) -> None:
        """Remove the post"""
        self.session.delete(post)
        self._commit(f'deleting post {post.id}')

    def _commit(self, action: str) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            current_app.logger.error(f'Database error while {action}: {e}')
            raise

# -*- coding: utf-8 -*-
"""
文章服務

處理文章的列表、讀取、建立、更新和刪除
"""
from typing import List, Optional

from flask import current_app

from postboard.models import Post
from postboard.services.post_store import PostStore
from postboard.utils import utcnow


class PostService:
    """處理文章操作的服務類別

    PostNotFound from the store propagates to the caller unchanged.
    """

    def __init__(self, store: Optional[PostStore] = None):
        self.store = store if store is not None else PostStore()

    def list_posts(self) -> List[Post]:
        return self.store.find_all()

    def count_posts(self) -> int:
        return self.store.count()

    def read_post(self, post_id: int) -> Post:
        return self.store.find_by_id(post_id)

    def add_post(self, title: Optional[str] = None) -> Post:
        """建立新文章

        參數:
            title: 文章標題；未提供時使用 POST_DEMO_TITLE

        回傳:
            已儲存並取得編號的文章
        """
        if title is None:
            title = current_app.config['POST_DEMO_TITLE']

        post = Post(title=title, created_at=utcnow())
        post = self.store.save(post)

        current_app.logger.info(f"建立文章：編號={post.id}, 標題={post.title}")
        return post

    def edit_post(self, post_id: int, title: Optional[str] = None) -> Post:
        """Update the title of an existing post and stamp updated_at

        Args:
            post_id: id of the post to update
            title: new title; POST_EDIT_DEMO_TITLE when omitted

        Returns:
            The updated post
        """
        post = self.store.find_by_id(post_id)

        if title is None:
            title = current_app.config['POST_EDIT_DEMO_TITLE']

        post.title = title
        post.updated_at = utcnow()
        post = self.store.save(post)

        current_app.logger.info(f"更新文章 {post.id}：標題={post.title}")
        return post

    def delete_post(self, post_id: int) -> None:
        post = self.store.find_by_id(post_id)
        self.store.delete(post)

        current_app.logger.info(f"文章 {post_id} 已刪除")

# -*- coding: utf-8 -*-
"""
Database Models Module

This module contains the database model for the postboard application.
"""
from postboard import db
from postboard.utils import utcnow


# ========================================
# Post Model
# ========================================

class Post(db.Model):
    """文章模型"""
    __tablename__ = 'posts'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=True)

    def to_dict(self) -> dict:
        """轉換為字典格式"""
        return {
            'id': self.id,
            'title': self.title,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }

    def __repr__(self):
        return f'<Post {self.title}>'

    def __str__(self):
        return self.title

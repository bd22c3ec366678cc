# -*- coding: utf-8 -*-
"""
Posts Blueprint

Public routes for browsing, reading, adding, editing and deleting posts.
PostNotFound raised by the service is turned into a 404 by the handler
registered in create_app.
"""
from flask import Blueprint, render_template, redirect, url_for, flash, request, abort

from postboard.forms import PostForm
from postboard.services.post_service import PostService


bp = Blueprint('posts', __name__)


def _submitted_title():
    """
    取得表單送出的標題

    GET 請求或未包含 title 欄位的 POST 回傳 None，由服務層使用預設標題。
    標題驗證失敗時回傳 400。
    """
    if request.method != 'POST' or 'title' not in request.form:
        return None

    form = PostForm()
    if not form.validate():
        abort(400)
    return form.title.data


@bp.route('/')
def browse():
    """首頁，顯示所有文章"""
    service = PostService()
    return render_template('post/browse.html',
                           posts=service.list_posts(),
                           total=service.count_posts())


@bp.route('/post/<int:id>', methods=['GET'])
def read(id):
    post = PostService().read_post(id)
    return render_template('post/read.html', post=post)


@bp.route('/post/add', methods=['GET', 'POST'])
def add():
    """建立新文章"""
    post = PostService().add_post(title=_submitted_title())
    flash(f'Post "{post.title}" created.', 'success')
    return redirect(url_for('posts.browse'))


@bp.route('/post/edit/<int:id>', methods=['GET', 'POST'])
def edit(id):
    """更新文章"""
    post = PostService().edit_post(id, title=_submitted_title())
    flash(f'Post "{post.title}" updated.', 'success')
    return redirect(url_for('posts.browse'))


@bp.route('/post/delete/<int:id>', methods=['GET', 'POST'])
def delete(id):
    """刪除文章"""
    PostService().delete_post(id)
    flash('Post deleted.', 'success')
    return redirect(url_for('posts.browse'))

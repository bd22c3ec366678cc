"""
Form Classes for postboard

Built on Flask-WTF and WTForms. The add and edit routes use PostForm to
validate a caller-supplied title.
"""
from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, Length


class PostForm(FlaskForm):
    title = StringField('Title', validators=[DataRequired(), Length(max=200)])
    submit = SubmitField('Submit')


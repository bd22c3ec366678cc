from dotenv import load_dotenv
from postboard import create_app, db
from postboard.models import Post


load_dotenv()

app = create_app()

@app.shell_context_processor
def make_shell_context():
    return {'db': db, 'Post': Post}

if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False))

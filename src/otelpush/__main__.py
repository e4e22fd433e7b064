from otelpush.cli import app

app(prog_name="otelpush")

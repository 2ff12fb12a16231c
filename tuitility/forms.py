from flask_wtf import FlaskForm
from wtforms import SelectField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, Email, Length, Optional, ValidationError


class FeedbackForm(FlaskForm):
    name = StringField("Name", validators=[Optional(), Length(max=100)])
    email = StringField("Email", validators=[Optional(), Email()])
    rating = SelectField(
        "How useful was this tool?",
        choices=[("5", "5 - Excellent"), ("4", "4 - Good"), ("3", "3 - Okay"), ("2", "2 - Poor"), ("1", "1 - Not useful")],
        default="5",
    )
    message = TextAreaField("Comments", validators=[DataRequired(), Length(max=2000)])
    submit = SubmitField("Send Feedback")

    def validate_message(self, field):
        if not field.data or not field.data.strip():
            raise ValidationError("Comments cannot be blank or only whitespace.")

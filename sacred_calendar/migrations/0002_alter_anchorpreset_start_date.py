from django.db import migrations, models

import sacred_calendar.validators


class Migration(migrations.Migration):
    dependencies = [
        ("sacred_calendar", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="anchorpreset",
            name="start_date",
            field=models.DateField(validators=[sacred_calendar.validators.validate_anchor_date]),
        ),
    ]

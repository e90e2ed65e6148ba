from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='BrewRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('extraction_weight', models.FloatField(help_text='Grams of liquid extracted')),
                ('extraction_time', models.FloatField(help_text='Extraction time in seconds')),
                ('grind_time', models.FloatField(help_text='Grind time in seconds')),
                ('timestamp', models.DateTimeField(db_index=True)),
                ('shift', models.CharField(choices=[('AM', 'AM'), ('PM', 'PM'), ('Night', 'Night')], max_length=5)),
            ],
            options={
                'db_table': 'brews',
                'ordering': ['-timestamp'],
            },
        ),
    ]

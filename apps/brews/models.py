from django.db import models


class Shift(models.TextChoices):
    AM = 'AM', 'AM'
    PM = 'PM', 'PM'
    NIGHT = 'Night', 'Night'


class BrewRecord(models.Model):
    """Single logged espresso brew. Immutable once saved."""

    # Measurements
    extraction_weight = models.FloatField(help_text='Grams of liquid extracted')
    extraction_time = models.FloatField(help_text='Extraction time in seconds')
    grind_time = models.FloatField(help_text='Grind time in seconds')

    # Set once when the brew is logged
    timestamp = models.DateTimeField(db_index=True)
    shift = models.CharField(max_length=5, choices=Shift.choices)

    class Meta:
        db_table = 'brews'
        ordering = ['-timestamp']

    def __str__(self):
        return (
            f"{self.extraction_weight}g / {self.extraction_time}s "
            f"({self.shift}, {self.timestamp:%Y-%m-%d %H:%M})"
        )

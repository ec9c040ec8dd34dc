# Contrainte ajoutée après coup: un compteur de votes ne descend jamais sous zéro

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('polls', '0001_initial'),
    ]

    operations = [
        migrations.AddConstraint(
            model_name='choice',
            constraint=models.CheckConstraint(
                condition=models.Q(votes__gte=0),
                name='polls_choice_votes_non_negative',
            ),
        ),
    ]

"""Initial schema: matches, their message log and per-founder feedback."""

import django.core.validators
import django.db.models.deletion
import django.db.models.expressions
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Match',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('pair_key', models.CharField(editable=False, max_length=41, unique=True)),
                ('risk_score', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_style_score', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('communication_score', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('skills_score', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('experience_score', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('goals_score', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('overall_score', models.PositiveSmallIntegerField(
                    db_index=True,
                    default=0,
                    validators=[
                        django.core.validators.MinValueValidator(0),
                        django.core.validators.MaxValueValidator(100),
                    ],
                )),
                ('quality', models.CharField(
                    choices=[('excellent', 'Excellent'), ('good', 'Good'), ('fair', 'Fair'), ('poor', 'Poor')],
                    default='fair',
                    max_length=10,
                )),
                ('status', models.CharField(
                    choices=[
                        ('pending', 'Pending'),
                        ('accepted', 'Accepted'),
                        ('rejected', 'Rejected'),
                        ('expired', 'Expired'),
                        ('connected', 'Connected'),
                    ],
                    db_index=True,
                    default='pending',
                    max_length=10,
                )),
                ('match_type', models.CharField(
                    choices=[
                        ('co-founder', 'Co-founder'),
                        ('mentor', 'Mentor'),
                        ('advisor', 'Advisor'),
                        ('investor', 'Investor'),
                    ],
                    default='co-founder',
                    max_length=12,
                )),
                ('founder1_interested', models.BooleanField(default=False)),
                ('founder2_interested', models.BooleanField(default=False)),
                ('founder1_interested_at', models.DateTimeField(blank=True, null=True)),
                ('founder2_interested_at', models.DateTimeField(blank=True, null=True)),
                ('first_message_at', models.DateTimeField(blank=True, null=True)),
                ('last_message_at', models.DateTimeField(blank=True, null=True)),
                ('accepted_at', models.DateTimeField(blank=True, null=True)),
                ('rejected_at', models.DateTimeField(blank=True, null=True)),
                ('expired_at', models.DateTimeField(blank=True, null=True)),
                ('connected_at', models.DateTimeField(blank=True, null=True)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('founder1', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='matches_initiated',
                    to=settings.AUTH_USER_MODEL,
                )),
                ('founder2', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='matches_received',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name': 'Match',
                'verbose_name_plural': 'Matches',
                'db_table': 'matching_match',
                'ordering': ['-overall_score', '-created_at'],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(('founder1', django.db.models.expressions.F('founder2')), _negated=True),
                        name='match_distinct_founders',
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name='MatchMessage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('content', models.CharField(max_length=1000)),
                ('sent_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('is_read', models.BooleanField(default=False)),
                ('match', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='messages',
                    to='matching.match',
                )),
                ('sender', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='match_messages',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name': 'Match Message',
                'verbose_name_plural': 'Match Messages',
                'db_table': 'matching_message',
                'ordering': ['sent_at', 'id'],
            },
        ),
        migrations.CreateModel(
            name='MatchFeedback',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('rating', models.PositiveSmallIntegerField(
                    help_text='1 (poor) to 5 (excellent)',
                    validators=[
                        django.core.validators.MinValueValidator(1),
                        django.core.validators.MaxValueValidator(5),
                    ],
                )),
                ('comment', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('match', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='feedback',
                    to='matching.match',
                )),
                ('author', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='match_feedback',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name': 'Match Feedback',
                'verbose_name_plural': 'Match Feedback',
                'db_table': 'matching_feedback',
                'ordering': ['-created_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('match', 'author'), name='unique_feedback_per_author'),
                ],
            },
        ),
    ]

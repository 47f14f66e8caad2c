"""Initial schema: pods, their members and goals."""

import django.core.validators
import django.db.models.deletion
import django.db.models.expressions
from django.conf import settings
from django.db import migrations, models

import pods.models


CATEGORY_CHOICES = [
    ('tech', 'Tech'),
    ('health', 'Health'),
    ('finance', 'Finance'),
    ('education', 'Education'),
    ('ecommerce', 'E-commerce'),
    ('ai', 'AI'),
    ('sustainability', 'Sustainability'),
    ('other', 'Other'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Pod',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=100)),
                ('description', models.TextField(max_length=1000)),
                ('category', models.CharField(choices=CATEGORY_CHOICES, db_index=True, max_length=20)),
                ('stage', models.CharField(
                    choices=[
                        ('planning', 'Planning'),
                        ('active', 'Active'),
                        ('completed', 'Completed'),
                        ('paused', 'Paused'),
                    ],
                    default='planning',
                    max_length=10,
                )),
                ('sprint_days', models.PositiveSmallIntegerField(
                    default=60,
                    validators=[
                        django.core.validators.MinValueValidator(30),
                        django.core.validators.MaxValueValidator(90),
                    ],
                )),
                ('start_date', models.DateTimeField()),
                ('end_date', models.DateTimeField()),
                ('compensation_model', models.CharField(
                    choices=[
                        ('equity', 'Equity'),
                        ('barter', 'Barter'),
                        ('rev_share', 'Revenue Share'),
                        ('hybrid', 'Hybrid'),
                    ],
                    max_length=10,
                )),
                ('equity_distribution', models.JSONField(blank=True, default=pods.models.default_equity_distribution)),
                ('communication', models.JSONField(blank=True, default=pods.models.default_communication)),
                ('is_public', models.BooleanField(default=True)),
                ('is_featured', models.BooleanField(default=False)),
                ('views', models.PositiveIntegerField(default=0)),
                ('application_count', models.PositiveIntegerField(default=0)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('status', models.CharField(
                    choices=[
                        ('draft', 'Draft'),
                        ('open', 'Open'),
                        ('full', 'Full'),
                        ('closed', 'Closed'),
                        ('completed', 'Completed'),
                    ],
                    db_index=True,
                    default='draft',
                    max_length=10,
                )),
                ('max_members', models.PositiveSmallIntegerField(default=10)),
                ('completion_percentage', models.PositiveSmallIntegerField(
                    default=0,
                    validators=[django.core.validators.MaxValueValidator(100)],
                )),
                ('progress_updated_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('founder', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='pods_founded',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name': 'Pod',
                'verbose_name_plural': 'Pods',
                'db_table': 'pods_pod',
                'ordering': ['-created_at'],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(('end_date__gt', django.db.models.expressions.F('start_date'))),
                        name='pod_ends_after_start',
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name='PodGoal',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('deadline', models.DateTimeField(blank=True, null=True)),
                ('status', models.CharField(
                    choices=[
                        ('pending', 'Pending'),
                        ('in_progress', 'In Progress'),
                        ('completed', 'Completed'),
                        ('overdue', 'Overdue'),
                    ],
                    default='pending',
                    max_length=12,
                )),
                ('completed_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('pod', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='goals',
                    to='pods.pod',
                )),
            ],
            options={
                'db_table': 'pods_goal',
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.CreateModel(
            name='PodMember',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('role', models.CharField(
                    choices=[
                        ('founder', 'Founder'),
                        ('co-founder', 'Co-founder'),
                        ('developer', 'Developer'),
                        ('designer', 'Designer'),
                        ('marketer', 'Marketer'),
                        ('mentor', 'Mentor'),
                        ('investor', 'Investor'),
                    ],
                    max_length=12,
                )),
                ('contribution', models.CharField(
                    choices=[
                        ('equity', 'Equity'),
                        ('barter', 'Barter'),
                        ('rev_share', 'Revenue Share'),
                        ('volunteer', 'Volunteer'),
                    ],
                    max_length=10,
                )),
                ('equity_percentage', models.DecimalField(
                    decimal_places=2,
                    default=0,
                    max_digits=5,
                    validators=[
                        django.core.validators.MinValueValidator(0),
                        django.core.validators.MaxValueValidator(100),
                    ],
                )),
                ('message', models.TextField(blank=True)),
                ('status', models.CharField(
                    choices=[('active', 'Active'), ('inactive', 'Inactive'), ('left', 'Left')],
                    default='active',
                    max_length=10,
                )),
                ('joined_at', models.DateTimeField(auto_now_add=True)),
                ('pod', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='members',
                    to='pods.pod',
                )),
                ('user', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='pod_memberships',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'db_table': 'pods_member',
                'ordering': ['joined_at', 'id'],
                'constraints': [
                    models.UniqueConstraint(fields=('pod', 'user'), name='unique_member_per_pod'),
                ],
            },
        ),
    ]

"""Initial schema: Foundic user accounts and the F-Coin point history."""

import django.contrib.auth.models
import django.contrib.auth.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


STAGE_CHOICES = [
    ('idea', 'Idea'),
    ('mvp', 'MVP'),
    ('users', 'First Users'),
    ('revenue', 'Revenue'),
    ('scaling', 'Scaling'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(
                    default=False,
                    help_text='Designates that this user has all permissions without explicitly assigning them.',
                    verbose_name='superuser status',
                )),
                ('username', models.CharField(
                    error_messages={'unique': 'A user with that username already exists.'},
                    help_text='Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.',
                    max_length=150,
                    unique=True,
                    validators=[django.contrib.auth.validators.UnicodeUsernameValidator()],
                    verbose_name='username',
                )),
                ('first_name', models.CharField(blank=True, max_length=150, verbose_name='first name')),
                ('last_name', models.CharField(blank=True, max_length=150, verbose_name='last name')),
                ('is_staff', models.BooleanField(
                    default=False,
                    help_text='Designates whether the user can log into this admin site.',
                    verbose_name='staff status',
                )),
                ('is_active', models.BooleanField(
                    default=True,
                    help_text='Designates whether this user should be treated as active. Unselect this instead of deleting accounts.',
                    verbose_name='active',
                )),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
                ('email', models.EmailField(max_length=254, unique=True)),
                ('name', models.CharField(max_length=255)),
                ('role', models.CharField(
                    choices=[('founder', 'Founder'), ('investor', 'Investor'), ('admin', 'Admin')],
                    db_index=True,
                    default='founder',
                    max_length=10,
                )),
                ('bio', models.CharField(blank=True, max_length=500)),
                ('location', models.CharField(blank=True, max_length=255)),
                ('avatar_url', models.URLField(blank=True)),
                ('skills', models.JSONField(blank=True, default=list)),
                ('experience', models.CharField(
                    blank=True,
                    choices=[('beginner', 'Beginner'), ('intermediate', 'Intermediate'), ('expert', 'Expert')],
                    default='beginner',
                    max_length=20,
                )),
                ('startup_name', models.CharField(blank=True, max_length=255)),
                ('startup_description', models.TextField(blank=True)),
                ('startup_stage', models.CharField(blank=True, choices=STAGE_CHOICES, default='idea', max_length=10)),
                ('startup_industry', models.CharField(blank=True, max_length=100)),
                ('startup_website', models.URLField(blank=True)),
                ('investor_type', models.CharField(
                    blank=True,
                    choices=[
                        ('angel', 'Angel'),
                        ('vc', 'Venture Capital'),
                        ('corporate', 'Corporate'),
                        ('family_office', 'Family Office'),
                    ],
                    max_length=20,
                )),
                ('investment_min', models.PositiveIntegerField(blank=True, null=True)),
                ('investment_max', models.PositiveIntegerField(blank=True, null=True)),
                ('focus_areas', models.JSONField(blank=True, default=list)),
                ('risk_tolerance', models.CharField(
                    blank=True,
                    choices=[('conservative', 'Conservative'), ('moderate', 'Moderate'), ('aggressive', 'Aggressive')],
                    default='moderate',
                    max_length=20,
                )),
                ('work_style', models.CharField(
                    blank=True,
                    choices=[('structured', 'Structured'), ('flexible', 'Flexible'), ('hybrid', 'Hybrid')],
                    default='hybrid',
                    max_length=20,
                )),
                ('communication_style', models.CharField(
                    blank=True,
                    choices=[('direct', 'Direct'), ('diplomatic', 'Diplomatic'), ('collaborative', 'Collaborative')],
                    default='collaborative',
                    max_length=20,
                )),
                ('points', models.PositiveIntegerField(db_index=True, default=0)),
                ('is_verified', models.BooleanField(default=False)),
                ('is_banned', models.BooleanField(default=False)),
                ('last_active_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('groups', models.ManyToManyField(
                    blank=True,
                    help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.',
                    related_name='user_set',
                    related_query_name='user',
                    to='auth.group',
                    verbose_name='groups',
                )),
                ('user_permissions', models.ManyToManyField(
                    blank=True,
                    help_text='Specific permissions for this user.',
                    related_name='user_set',
                    related_query_name='user',
                    to='auth.permission',
                    verbose_name='user permissions',
                )),
            ],
            options={
                'verbose_name': 'User',
                'verbose_name_plural': 'Users',
                'db_table': 'core_user',
                'ordering': ['-created_at'],
            },
            managers=[
                ('objects', django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name='PointTransaction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('amount', models.IntegerField()),
                ('action', models.CharField(max_length=50)),
                ('description', models.CharField(blank=True, max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='point_transactions',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name': 'Point Transaction',
                'verbose_name_plural': 'Point Transactions',
                'db_table': 'core_point_transaction',
                'ordering': ['created_at', 'id'],
            },
        ),
    ]

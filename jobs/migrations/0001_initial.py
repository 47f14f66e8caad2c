"""Initial schema: job postings and applications."""

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


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
        ('pods', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Job',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(max_length=5000)),
                ('category', models.CharField(choices=CATEGORY_CHOICES, db_index=True, max_length=20)),
                ('job_type', models.CharField(
                    choices=[
                        ('full-time', 'Full-time'),
                        ('part-time', 'Part-time'),
                        ('contract', 'Contract'),
                        ('internship', 'Internship'),
                        ('volunteer', 'Volunteer'),
                    ],
                    max_length=12,
                )),
                ('location', models.CharField(max_length=255)),
                ('remote', models.BooleanField(default=False)),
                ('salary_min', models.PositiveIntegerField(blank=True, null=True)),
                ('salary_max', models.PositiveIntegerField(blank=True, null=True)),
                ('salary_currency', models.CharField(default='USD', max_length=3)),
                ('salary_period', models.CharField(
                    choices=[('hourly', 'Hourly'), ('monthly', 'Monthly'), ('yearly', 'Yearly')],
                    default='yearly',
                    max_length=10,
                )),
                ('requirements', models.JSONField(blank=True, default=list)),
                ('benefits', models.JSONField(blank=True, default=list)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('status', models.CharField(
                    choices=[('active', 'Active'), ('paused', 'Paused'), ('closed', 'Closed'), ('deleted', 'Deleted')],
                    db_index=True,
                    default='active',
                    max_length=10,
                )),
                ('views', models.PositiveIntegerField(default=0)),
                ('shares', models.PositiveIntegerField(default=0)),
                ('deadline', models.DateTimeField(blank=True, null=True)),
                ('is_public', models.BooleanField(default=True)),
                ('is_featured', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('employer', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='jobs_posted',
                    to=settings.AUTH_USER_MODEL,
                )),
                ('pod', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='jobs',
                    to='pods.pod',
                )),
            ],
            options={
                'verbose_name': 'Job',
                'verbose_name_plural': 'Jobs',
                'db_table': 'jobs_job',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='JobApplication',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('cover_letter', models.TextField(max_length=2000)),
                ('resume', models.CharField(blank=True, max_length=500)),
                ('status', models.CharField(
                    choices=[
                        ('pending', 'Pending'),
                        ('reviewed', 'Reviewed'),
                        ('accepted', 'Accepted'),
                        ('rejected', 'Rejected'),
                    ],
                    default='pending',
                    max_length=10,
                )),
                ('feedback', models.TextField(blank=True)),
                ('applied_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('job', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='applications',
                    to='jobs.job',
                )),
                ('applicant', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='job_applications',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name': 'Job Application',
                'verbose_name_plural': 'Job Applications',
                'db_table': 'jobs_application',
                'ordering': ['applied_at', 'id'],
                'constraints': [
                    models.UniqueConstraint(fields=('job', 'applicant'), name='unique_application_per_job'),
                ],
            },
        ),
    ]

"""Initial schema: posts with their likes, comments and shares."""

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
    ]

    operations = [
        migrations.CreateModel(
            name='Post',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('post_type', models.CharField(
                    choices=[
                        ('fail_forward', 'Fail Forward'),
                        ('signal_boost', 'Signal Boost'),
                        ('investor_connect', 'Investor Connect'),
                        ('general', 'General'),
                    ],
                    db_index=True,
                    max_length=20,
                )),
                ('title', models.CharField(max_length=200)),
                ('content', models.TextField(max_length=5000)),
                ('details', models.JSONField(blank=True, default=dict)),
                ('media', models.JSONField(blank=True, default=list)),
                ('category', models.CharField(choices=CATEGORY_CHOICES, default='other', max_length=20)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('visibility', models.CharField(
                    choices=[('public', 'Public'), ('community', 'Community'), ('private', 'Private')],
                    default='public',
                    max_length=10,
                )),
                ('is_approved', models.BooleanField(default=True)),
                ('is_featured', models.BooleanField(default=False)),
                ('is_pinned', models.BooleanField(default=False)),
                ('status', models.CharField(
                    choices=[
                        ('draft', 'Draft'),
                        ('published', 'Published'),
                        ('archived', 'Archived'),
                        ('deleted', 'Deleted'),
                    ],
                    db_index=True,
                    default='published',
                    max_length=10,
                )),
                ('views', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('author', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='posts',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name': 'Post',
                'verbose_name_plural': 'Posts',
                'db_table': 'posts_post',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='PostComment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('content', models.CharField(max_length=1000)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('post', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='comments',
                    to='posts.post',
                )),
                ('user', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='post_comments',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'db_table': 'posts_comment',
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.CreateModel(
            name='PostLike',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('post', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='likes',
                    to='posts.post',
                )),
                ('user', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='post_likes',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'db_table': 'posts_like',
                'ordering': ['created_at', 'id'],
                'constraints': [
                    models.UniqueConstraint(fields=('post', 'user'), name='unique_like_per_user'),
                ],
            },
        ),
        migrations.CreateModel(
            name='PostShare',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('platform', models.CharField(max_length=50)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('post', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='shares',
                    to='posts.post',
                )),
                ('user', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='post_shares',
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'db_table': 'posts_share',
                'ordering': ['created_at', 'id'],
            },
        ),
    ]

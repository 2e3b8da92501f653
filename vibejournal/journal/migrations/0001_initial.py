import uuid

import django.db.models.deletion
import django.db.models.functions.text
import django.db.models.lookups
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='JournalEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('content', models.TextField()),
                ('category', models.CharField(choices=[('thoughts', 'Thoughts'), ('wishes', 'Wishes'), ('grievances', 'Grievances'), ('reflection', 'Reflection'), ('gratitude', 'Gratitude')], default='thoughts', max_length=20)),
                ('media_type', models.CharField(choices=[('text', 'Text'), ('voice', 'Voice'), ('annotated_media_link', 'Media Link'), ('image', 'Image'), ('video', 'Video')], default='text', max_length=20)),
                ('media_url', models.TextField(blank=True, null=True)),
                ('media_annotation', models.TextField(blank=True, null=True)),
                ('vibe', models.CharField(blank=True, choices=[('happy', 'Happy'), ('sad', 'Sad'), ('anxious', 'Anxious'), ('calm', 'Calm'), ('excited', 'Excited'), ('angry', 'Angry'), ('peaceful', 'Peaceful'), ('confused', 'Confused'), ('hopeful', 'Hopeful'), ('neutral', 'Neutral')], max_length=20, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='journal_entries', to='accounts.profile')),
            ],
            options={
                'verbose_name_plural': 'journal entries',
                'db_table': 'journal_entries',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['category'], name='idx_journal_entries_category'),
                    models.Index(fields=['media_type'], name='idx_journal_entries_media_type'),
                    models.Index(fields=['vibe'], name='idx_journal_entries_vibe'),
                    models.Index(fields=['-created_at'], name='idx_journal_entries_created_at'),
                ],
                'constraints': [
                    models.CheckConstraint(
                        condition=django.db.models.lookups.GreaterThan(
                            django.db.models.functions.text.Length(django.db.models.functions.text.Trim('content')), 0
                        ),
                        name='journal_entries_content_not_empty',
                        violation_error_message='Entry content cannot be empty.',
                    ),
                    models.CheckConstraint(
                        condition=models.Q(('category__in', ['thoughts', 'wishes', 'grievances', 'reflection', 'gratitude'])),
                        name='journal_entries_category_valid',
                    ),
                    models.CheckConstraint(
                        condition=models.Q(('media_type__in', ['text', 'voice', 'annotated_media_link', 'image', 'video'])),
                        name='journal_entries_media_type_valid',
                    ),
                    models.CheckConstraint(
                        condition=models.Q(('vibe__isnull', True), ('vibe__in', ['happy', 'sad', 'anxious', 'calm', 'excited', 'angry', 'peaceful', 'confused', 'hopeful', 'neutral']), _connector='OR'),
                        name='journal_entries_vibe_valid',
                    ),
                ],
            },
        ),
    ]

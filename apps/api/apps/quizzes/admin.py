from django.contrib import admin
from .models import Quiz, Question, Option, QuizResult


class QuestionInline(admin.StackedInline):
    model = Question
    extra = 0
    fields = ['text', 'position']


class OptionInline(admin.TabularInline):
    model = Option
    extra = 0
    fields = ['text', 'score', 'position']


@admin.register(Quiz)
class QuizAdmin(admin.ModelAdmin):
    list_display = ['title', 'doctor', 'created_at']
    search_fields = ['title']
    readonly_fields = ['id', 'created_at']
    autocomplete_fields = ['doctor']
    inlines = [QuestionInline]


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'quiz', 'position']
    list_filter = ['quiz']
    readonly_fields = ['id']
    inlines = [OptionInline]


@admin.register(QuizResult)
class QuizResultAdmin(admin.ModelAdmin):
    list_display = ['quiz', 'patient', 'score', 'max_score', 'taken_at']
    list_filter = ['quiz']
    readonly_fields = ['id', 'patient', 'quiz', 'score', 'max_score', 'answers', 'taken_at']

    def has_add_permission(self, request):
        # Results only come from submissions
        return False

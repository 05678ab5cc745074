from fitlife.enums.app_enum import BMICategoryEnum, DietTypeEnum, GoalTypeEnum, WorkoutTypeEnum


EXERCISE_PLANS = {
    # Strength + yoga
    BMICategoryEnum.underweight: [
        {
            "type": WorkoutTypeEnum.strength,
            "duration": 45,
            "description": "Full body strength training with compound movements (squats, deadlifts, bench press)",
        },
        {
            "type": WorkoutTypeEnum.yoga,
            "duration": 30,
            "description": "Gentle yoga for flexibility and mind-body connection",
        },
        {
            "type": WorkoutTypeEnum.strength,
            "duration": 40,
            "description": "Upper body focused - pull-ups, rows, shoulder press",
        },
    ],
    # Balanced routine
    BMICategoryEnum.normal: [
        {
            "type": WorkoutTypeEnum.cardio,
            "duration": 30,
            "description": "Moderate intensity cardio - jogging, cycling, or swimming",
        },
        {
            "type": WorkoutTypeEnum.strength,
            "duration": 40,
            "description": "Full body resistance training with weights",
        },
        {
            "type": WorkoutTypeEnum.flexibility,
            "duration": 25,
            "description": "Stretching and mobility work to prevent injuries",
        },
    ],
    # More cardio + HIIT
    BMICategoryEnum.overweight: [
        {
            "type": WorkoutTypeEnum.cardio,
            "duration": 40,
            "description": "Steady-state cardio - brisk walking, elliptical, or cycling",
        },
        {
            "type": WorkoutTypeEnum.hiit,
            "duration": 25,
            "description": "High-intensity interval training - burpees, jump squats, mountain climbers",
        },
        {
            "type": WorkoutTypeEnum.strength,
            "duration": 30,
            "description": "Circuit training with bodyweight and light weights",
        },
    ],
    # Low-impact cardio + gradual strength
    BMICategoryEnum.obese: [
        {
            "type": WorkoutTypeEnum.cardio,
            "duration": 30,
            "description": "Low-impact cardio - walking, water aerobics, or stationary bike",
        },
        {
            "type": WorkoutTypeEnum.strength,
            "duration": 20,
            "description": "Gentle strength training focusing on major muscle groups",
        },
        {
            "type": WorkoutTypeEnum.flexibility,
            "duration": 20,
            "description": "Gentle stretching and chair yoga for mobility",
        },
    ],
}

GOAL_EXTRA_WORKOUTS = {
    GoalTypeEnum.weight_loss: {
        "type": WorkoutTypeEnum.hiit,
        "duration": 20,
        "description": "Fat-burning HIIT session - sprint intervals or tabata training",
    },
    GoalTypeEnum.maintain: None,
    GoalTypeEnum.muscle_gain: {
        "type": WorkoutTypeEnum.strength,
        "duration": 50,
        "description": "Progressive overload strength training - focus on hypertrophy (8-12 reps)",
    },
}

DIET_PLANS = {
    DietTypeEnum.veg: {
        GoalTypeEnum.weight_loss: {
            "breakfast": [
                "Oatmeal with berries and chia seeds",
                "Green smoothie with spinach, banana, and protein powder",
                "Whole grain toast with avocado and boiled eggs",
            ],
            "lunch": [
                "Quinoa salad with mixed vegetables and chickpeas",
                "Brown rice with dal and steamed vegetables",
                "Whole wheat wrap with hummus, veggies, and tofu",
            ],
            "dinner": [
                "Grilled paneer with roasted vegetables",
                "Vegetable stir-fry with tofu and cauliflower rice",
                "Lentil soup with a side salad",
            ],
            "snacks": [
                "Greek yogurt with almonds",
                "Apple slices with peanut butter",
                "Mixed nuts and seeds (handful)",
                "Cucumber and carrot sticks with hummus",
            ],
        },
        GoalTypeEnum.maintain: {
            "breakfast": [
                "Whole grain cereal with milk and banana",
                "Vegetable poha with peanuts",
                "Smoothie bowl with fruits, granola, and seeds",
            ],
            "lunch": [
                "Brown rice with mixed dal and sabzi",
                "Whole wheat roti with paneer curry and salad",
                "Vegetable biryani with raita",
            ],
            "dinner": [
                "Grilled vegetables with quinoa",
                "Palak paneer with brown rice",
                "Mixed vegetable curry with roti",
            ],
            "snacks": [
                "Fresh fruit salad",
                "Roasted chickpeas",
                "Whole grain crackers with cheese",
                "Protein shake",
            ],
        },
        GoalTypeEnum.muscle_gain: {
            "breakfast": [
                "Protein pancakes with banana and peanut butter",
                "Scrambled eggs (or tofu scramble) with whole grain toast",
                "Oatmeal with protein powder, nuts, and honey",
            ],
            "lunch": [
                "Brown rice with rajma and paneer",
                "Chickpea pasta with vegetables and olive oil",
                "Quinoa bowl with beans, avocado, and tahini",
            ],
            "dinner": [
                "Grilled paneer tikka with sweet potato",
                "Lentil curry with brown rice and ghee",
                "Tofu stir-fry with nuts and seeds",
            ],
            "snacks": [
                "Protein shake with banana",
                "Peanut butter sandwich on whole grain bread",
                "Greek yogurt with granola and berries",
                "Trail mix with dried fruits and nuts",
            ],
        },
    },
    DietTypeEnum.nonveg: {
        GoalTypeEnum.weight_loss: {
            "breakfast": [
                "Scrambled eggs with spinach and whole grain toast",
                "Greek yogurt with berries and protein granola",
                "Egg white omelet with vegetables",
            ],
            "lunch": [
                "Grilled chicken breast with quinoa and steamed broccoli",
                "Tuna salad with mixed greens and olive oil",
                "Turkey wrap with whole wheat tortilla and veggies",
            ],
            "dinner": [
                "Baked salmon with roasted vegetables",
                "Grilled chicken with cauliflower rice",
                "Fish curry with brown rice",
            ],
            "snacks": [
                "Boiled eggs",
                "Greek yogurt",
                "Chicken breast strips",
                "Protein shake",
            ],
        },
        GoalTypeEnum.maintain: {
            "breakfast": [
                "Egg bhurji with whole wheat roti",
                "Chicken sausage with whole grain toast",
                "Protein smoothie with eggs and fruits",
            ],
            "lunch": [
                "Chicken biryani with raita",
                "Fish curry with brown rice",
                "Grilled chicken salad with quinoa",
            ],
            "dinner": [
                "Grilled fish with vegetables",
                "Chicken tikka with roti and dal",
                "Mutton curry with brown rice",
            ],
            "snacks": [
                "Boiled eggs with nuts",
                "Chicken sandwich",
                "Greek yogurt with honey",
                "Protein bar",
            ],
        },
        GoalTypeEnum.muscle_gain: {
            "breakfast": [
                "Scrambled eggs (4-5) with whole grain toast and avocado",
                "Protein pancakes with chicken sausage",
                "Egg and cheese omelet with hash browns",
            ],
            "lunch": [
                "Grilled chicken breast with sweet potato and vegetables",
                "Beef or chicken with brown rice and beans",
                "Salmon with quinoa and avocado",
            ],
            "dinner": [
                "Grilled steak with roasted potatoes",
                "Chicken curry with brown rice and ghee",
                "Fish with pasta and olive oil",
            ],
            "snacks": [
                "Protein shake with whole milk",
                "Chicken breast with peanut butter",
                "Boiled eggs (3-4) with nuts",
                "Greek yogurt with granola and honey",
            ],
        },
    },
}

PORTION_NOTES = {
    BMICategoryEnum.underweight: "Note: Increase portions for weight gain",
    BMICategoryEnum.normal: None,
    BMICategoryEnum.overweight: None,
    BMICategoryEnum.obese: "Note: Practice portion control for weight management",
}

GOAL_EXERCISE_TIPS = {
    GoalTypeEnum.weight_loss: "Focus on consistency and gradually increase intensity for best results.",
    GoalTypeEnum.maintain: "Maintain a balanced routine to stay healthy and fit.",
    GoalTypeEnum.muscle_gain: "Ensure proper nutrition and rest between strength training sessions.",
}

GOAL_DIET_TIPS = {
    GoalTypeEnum.weight_loss: "Focus on portion control and avoid processed foods. Stay hydrated!",
    GoalTypeEnum.maintain: "Eat balanced meals with variety. Listen to your body's hunger cues.",
    GoalTypeEnum.muscle_gain: "Eat protein-rich meals and maintain a calorie surplus. Don't skip meals!",
}

MEAL_TIMING = {
    "breakfast": "7:00 AM - 9:00 AM",
    "lunch": "12:00 PM - 2:00 PM",
    "dinner": "6:00 PM - 8:00 PM",
    "snacks": "Between meals as needed",
}

GENERAL_TIPS = [
    "Stay consistent with your routine",
    "Get 7-8 hours of quality sleep",
    "Stay hydrated throughout the day",
    "Track your progress regularly",
    "Listen to your body and adjust as needed",
]

WATER_INTAKE_ADVICE = "2.5-3 liters per day"
